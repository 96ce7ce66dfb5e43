"""API test fixtures — FastAPI app over a fresh in-memory store.

Invariants:
    - get_db overridden to use the per-test DatabaseSessionManager
    - Lifespan not run by ASGITransport: pipeline comes from app.state (built at import)
"""

import pytest
from httpx import ASGITransport, AsyncClient

from videogame_api.infrastructure.database import get_db
from videogame_api.main import app


@pytest.fixture
async def client(db_manager):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with db_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()

"""Root conftest — shared test configuration and store fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database (own DatabaseSessionManager)
    - Settings forced to a hermetic profile before videogame_api.main is imported
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SEED_SAMPLE_GAMES", "false")
os.environ.setdefault("ENVIRONMENT", "production")

import logging  # noqa: E402

import pytest  # noqa: E402

from videogame_api.infrastructure.database import DatabaseSessionManager  # noqa: E402
from videogame_api.infrastructure.store import VideoGameStore  # noqa: E402
from videogame_api.services.dispatch import build_pipeline  # noqa: E402


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await manager.create_all()
    yield manager
    await manager.dispose()


@pytest.fixture
async def test_db(db_manager):
    async with db_manager.session() as session:
        yield session


@pytest.fixture
def store(test_db):
    return VideoGameStore(test_db)


@pytest.fixture
def pipeline():
    return build_pipeline(logging.getLogger("tests.pipeline"))

"""Video Game API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery — ExMA anti-pattern)
    - Pipeline built once here, with its own logger, and shared via app.state
    - One global error translator (api/error_handlers.py) for every failure
    - Logging and database lifecycles owned by the lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Request logging is the outermost middleware so 500s are logged with their status
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from videogame_api.api.error_handlers import register_error_handlers
from videogame_api.api.routes import health, video_games
from videogame_api.config import get_settings
from videogame_api.infrastructure.database import init_db
from videogame_api.infrastructure.observability import (
    RequestLoggingMiddleware, setup_logging, teardown_logging,
)
from videogame_api.infrastructure.seed import seed_sample_games
from videogame_api.services.dispatch import build_pipeline

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    log_handler = setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    await manager.create_all()
    if settings.seed_sample_games:
        async with manager.session() as db:
            await seed_sample_games(db)
    logger.info(f"Video Game API started ({settings.environment})")
    yield
    logger.info("Video Game API shutting down")
    await manager.dispose()
    teardown_logging(log_handler)


settings = get_settings()

app = FastAPI(title="Video Game API", version="1.0.0", lifespan=lifespan)
app.state.pipeline = build_pipeline(logging.getLogger("videogame_api.pipeline"))

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

# Routes — explicit registration (ExMA: no convention-over-config)
app.include_router(health.router)
app.include_router(video_games.router)

register_error_handlers(app, development=settings.is_development)

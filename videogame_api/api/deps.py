"""API Dependencies — per-request store and the process-wide pipeline.

Invariants:
    - One VideoGameStore per request, bound to that request's DB session
    - Store's cancellation probe is the request's disconnect check
    - Pipeline built once at startup (main.py) and read from app.state
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from videogame_api.infrastructure.database import get_db
from videogame_api.infrastructure.store import VideoGameStore
from videogame_api.services.pipeline import Pipeline


async def get_store(
    request: Request, db: AsyncSession = Depends(get_db),
) -> VideoGameStore:
    return VideoGameStore(db, is_cancelled=request.is_disconnected)


def get_pipeline(request: Request) -> Pipeline:
    return request.app.state.pipeline

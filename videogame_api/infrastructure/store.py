"""Video Game Store — the only persistence surface handlers see.

Invariants:
    - Exposes lookup / add / remove / list / commit, nothing else
    - commit() is the single suspension point that may wait on IO
    - Caller cancellation observed at commit and raised as OperationCancelledError
    - IntegrityError mapped to ConflictError after rollback (never leaks SQLAlchemy types)
    - Ids outside the signed 64-bit INTEGER range are absent, never sent to the driver

Design Decisions:
    - Thin wrapper over AsyncSession instead of a generic repository: five use cases,
      one entity (ADR: ExMA no speculative abstraction)
    - is_cancelled probe injected by the endpoint layer (request.is_disconnected)
"""

import asyncio
import logging
from typing import Awaitable, Callable

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from videogame_api.core.errors import ConflictError, OperationCancelledError
from videogame_api.models.video_game import VideoGame

logger = logging.getLogger(__name__)

CancellationProbe = Callable[[], Awaitable[bool]]

MIN_STORED_ID: int = -2**63
MAX_STORED_ID: int = 2**63 - 1


class VideoGameStore:
    """Per-request store handle. Not shared across requests."""

    def __init__(
        self, db: AsyncSession, is_cancelled: CancellationProbe | None = None,
    ):
        self._db = db
        self._is_cancelled = is_cancelled

    async def get(self, game_id: int) -> VideoGame | None:
        if not MIN_STORED_ID <= game_id <= MAX_STORED_ID:
            return None
        return await self._db.get(VideoGame, game_id)

    async def list_all(self) -> list[VideoGame]:
        result = await self._db.execute(select(VideoGame).order_by(VideoGame.id))
        return list(result.scalars().all())

    def add(self, game: VideoGame) -> None:
        self._db.add(game)

    async def remove(self, game: VideoGame) -> None:
        await self._db.delete(game)

    async def commit(self) -> None:
        """Persist all pending mutations atomically."""
        if self._is_cancelled is not None and await self._is_cancelled():
            await self._db.rollback()
            raise OperationCancelledError("Caller cancelled before commit")
        try:
            await self._db.commit()
        except IntegrityError as e:
            await self._db.rollback()
            logger.error(f"Store integrity error: {e}")
            raise ConflictError(str(e.orig or e)) from e
        except asyncio.CancelledError as e:
            await self._db.rollback()
            raise OperationCancelledError("Caller cancelled during commit") from e

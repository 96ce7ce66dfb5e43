"""Sample Catalog — seeds a fresh store with five well-known games.

Invariants:
    - Runs only when the table is empty (never duplicates, never overwrites)
    - Explicit ids 1-5; AUTOINCREMENT continues from 6 afterwards
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from videogame_api.models.video_game import VideoGame

logger = logging.getLogger(__name__)

SAMPLE_GAMES: tuple[tuple[int, str, str, int], ...] = (
    (1, "The Legend of Zelda: Breath of the Wild", "Action", 2017),
    (2, "The Witcher 3: Wild Hunt", "RPG", 2015),
    (3, "DOOM Eternal", "Shooter", 2020),
    (4, "Red Dead Redemption 2", "Adventure", 2018),
    (5, "Civilization VI", "Strategy", 2016),
)


async def seed_sample_games(db: AsyncSession) -> int:
    """Insert SAMPLE_GAMES into an empty store. Returns rows inserted."""
    existing = await db.scalar(select(func.count()).select_from(VideoGame))
    if existing:
        return 0
    db.add_all(
        VideoGame(id=gid, title=title, genre=genre, release_year=year)
        for gid, title, genre, year in SAMPLE_GAMES
    )
    await db.commit()
    logger.info(f"Seeded {len(SAMPLE_GAMES)} sample games")
    return len(SAMPLE_GAMES)

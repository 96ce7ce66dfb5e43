"""VideoGame ORM — the single catalog entity.

Invariants:
    - id is integer primary key assigned by the store, never reused after deletion
    - title <= 100 chars, genre <= 50 chars, both non-nullable
    - release_year non-nullable; range enforced by the validator, not the schema

Design Decisions:
    - sqlite_autoincrement: SQLite AUTOINCREMENT keeps ids monotonic across deletes
      (plain INTEGER PRIMARY KEY would recycle the highest deleted id)
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from videogame_api.core.validation import GENRE_MAX_LENGTH, TITLE_MAX_LENGTH
from videogame_api.db.base import Base


class VideoGame(Base):
    """Catalog entry."""
    __tablename__ = "video_games"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(
        String(TITLE_MAX_LENGTH), nullable=False,
    )
    genre: Mapped[str] = mapped_column(
        String(GENRE_MAX_LENGTH), nullable=False,
    )
    release_year: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return (
            f"VideoGame(id={self.id!r}, title={self.title!r}, "
            f"genre={self.genre!r}, release_year={self.release_year!r})"
        )

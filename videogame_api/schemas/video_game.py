"""Video Game Schemas — HTTP request bodies and the public game representation.

Invariants:
    - Wire names are camelCase (releaseYear); Python attributes stay snake_case
    - GameRequest only checks JSON types: field rules live in core/validation.py so
      missing, empty and out-of-range values all produce the same per-field payload
    - VideoGameResponse is frozen: built once from post-commit entity state

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from videogame_api.models.video_game import VideoGame


class GameRequest(BaseModel):
    """Body for POST /api/games and PUT /api/games/{id}."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str | None = None
    genre: str | None = None
    release_year: int | None = None


class VideoGameResponse(BaseModel):
    """Public game representation."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True,
    )

    id: int
    title: str
    genre: str
    release_year: int

    @classmethod
    def from_entity(cls, game: VideoGame) -> "VideoGameResponse":
        return cls(
            id=game.id, title=game.title,
            genre=game.genre, release_year=game.release_year,
        )

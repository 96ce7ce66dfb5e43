"""Create Game — insert a new catalog entry; the store assigns the id.

Invariants:
    - Entity is visible to reads only after commit()
    - Never returns NotFound
"""

from dataclasses import dataclass
from datetime import date

from videogame_api.core.validation import ValidationResult, validate_game_fields
from videogame_api.infrastructure.store import VideoGameStore
from videogame_api.models.video_game import VideoGame
from videogame_api.schemas.video_game import VideoGameResponse


@dataclass(frozen=True)
class CreateGameCommand:
    title: str | None
    genre: str | None
    release_year: int | None


def validate(command: CreateGameCommand, today: date | None = None) -> ValidationResult:
    return validate_game_fields(
        command.title, command.genre, command.release_year, today,
    )


async def handle(command: CreateGameCommand, store: VideoGameStore) -> VideoGameResponse:
    game = VideoGame(
        title=command.title,
        genre=command.genre,
        release_year=command.release_year,
    )
    store.add(game)
    await store.commit()
    return VideoGameResponse.from_entity(game)

"""Update Game — replace title/genre/release year of an existing entry.

Invariants:
    - id is taken from the command and never changes
    - Missing id returns NOT_FOUND without touching the store
"""

from dataclasses import dataclass
from datetime import date

from videogame_api.core.result import NOT_FOUND, Found, LookupResult
from videogame_api.core.validation import ValidationResult, validate_game_fields
from videogame_api.infrastructure.store import VideoGameStore
from videogame_api.schemas.video_game import VideoGameResponse


@dataclass(frozen=True)
class UpdateGameCommand:
    id: int
    title: str | None
    genre: str | None
    release_year: int | None


def validate(command: UpdateGameCommand, today: date | None = None) -> ValidationResult:
    return validate_game_fields(
        command.title, command.genre, command.release_year, today,
    )


async def handle(
    command: UpdateGameCommand, store: VideoGameStore,
) -> LookupResult[VideoGameResponse]:
    game = await store.get(command.id)
    if game is None:
        return NOT_FOUND
    game.title = command.title
    game.genre = command.genre
    game.release_year = command.release_year
    await store.commit()
    return Found(VideoGameResponse.from_entity(game))

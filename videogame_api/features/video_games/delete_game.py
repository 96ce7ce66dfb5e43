"""Delete Game — remove an entry. Safe to repeat: second call returns NOT_FOUND."""

from dataclasses import dataclass

from videogame_api.core.result import NOT_FOUND, Found, LookupResult
from videogame_api.infrastructure.store import VideoGameStore


@dataclass(frozen=True)
class DeleteGameCommand:
    id: int


async def handle(
    command: DeleteGameCommand, store: VideoGameStore,
) -> LookupResult[bool]:
    game = await store.get(command.id)
    if game is None:
        return NOT_FOUND
    await store.remove(game)
    await store.commit()
    return Found(True)

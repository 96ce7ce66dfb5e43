"""Get All Games — full catalog listing, ordered by id."""

from dataclasses import dataclass

from videogame_api.infrastructure.store import VideoGameStore
from videogame_api.schemas.video_game import VideoGameResponse


@dataclass(frozen=True)
class GetAllGamesQuery:
    pass


async def handle(
    query: GetAllGamesQuery, store: VideoGameStore,
) -> list[VideoGameResponse]:
    return [VideoGameResponse.from_entity(g) for g in await store.list_all()]

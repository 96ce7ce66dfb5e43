"""Get Game By Id — point lookup; absence is a NotFound value."""

from dataclasses import dataclass

from videogame_api.core.result import NOT_FOUND, Found, LookupResult
from videogame_api.infrastructure.store import VideoGameStore
from videogame_api.schemas.video_game import VideoGameResponse


@dataclass(frozen=True)
class GetGameByIdQuery:
    id: int


async def handle(
    query: GetGameByIdQuery, store: VideoGameStore,
) -> LookupResult[VideoGameResponse]:
    game = await store.get(query.id)
    if game is None:
        return NOT_FOUND
    return Found(VideoGameResponse.from_entity(game))

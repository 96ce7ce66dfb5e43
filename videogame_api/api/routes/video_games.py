"""Video Game Routes — thin HTTP adapters over the command pipeline.

Invariants:
    - Every route builds exactly one command and dispatches it through the pipeline
    - NotFound results rendered here as 404 problem details (never raised)
    - Validation, conflict and internal failures propagate to api/error_handlers.py

Design Decisions:
    - No business logic in routes (ADR: ExMA impureim sandwich)
    - Location header on create points at GET /api/games/{id}
    - Ids matched by a signed-integer path convertor: a non-integer segment matches
      no route (404), any integer reaches the handler
"""

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse
from starlette.convertors import Convertor, register_url_convertor

from videogame_api.api.deps import get_pipeline, get_store
from videogame_api.api.error_handlers import problem_details
from videogame_api.core.result import Found
from videogame_api.features.video_games.create_game import CreateGameCommand
from videogame_api.features.video_games.delete_game import DeleteGameCommand
from videogame_api.features.video_games.get_all_games import GetAllGamesQuery
from videogame_api.features.video_games.get_game_by_id import GetGameByIdQuery
from videogame_api.features.video_games.update_game import UpdateGameCommand
from videogame_api.infrastructure.store import VideoGameStore
from videogame_api.schemas.video_game import GameRequest, VideoGameResponse
from videogame_api.services.pipeline import Pipeline


class SignedIntConvertor(Convertor[int]):
    """Like Starlette's int convertor, but also matches negative ids."""

    regex = "-?[0-9]+"

    def convert(self, value: str) -> int:
        return int(value)

    def to_string(self, value: int) -> str:
        return str(int(value))


register_url_convertor("signed_int", SignedIntConvertor())

router = APIRouter(prefix="/api/games", tags=["games"])


def _not_found(request: Request, game_id: int) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=problem_details(
            status.HTTP_404_NOT_FOUND, "Not Found",
            f"Video game with id {game_id} not found.", request.url.path,
        ),
    )


@router.get("", response_model=list[VideoGameResponse])
async def get_all_games(
    store: VideoGameStore = Depends(get_store),
    pipeline: Pipeline = Depends(get_pipeline),
):
    """List every game."""
    return await pipeline.dispatch(GetAllGamesQuery(), store)


@router.get(
    "/{game_id:signed_int}", response_model=VideoGameResponse, name="get_game_by_id",
)
async def get_game_by_id(
    game_id: int,
    request: Request,
    store: VideoGameStore = Depends(get_store),
    pipeline: Pipeline = Depends(get_pipeline),
):
    """Get one game or 404."""
    result = await pipeline.dispatch(GetGameByIdQuery(game_id), store)
    if not isinstance(result, Found):
        return _not_found(request, game_id)
    return result.value


@router.post(
    "", response_model=VideoGameResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_game(
    body: GameRequest,
    request: Request,
    response: Response,
    store: VideoGameStore = Depends(get_store),
    pipeline: Pipeline = Depends(get_pipeline),
):
    """Create a game. 201 + Location header."""
    created = await pipeline.dispatch(
        CreateGameCommand(body.title, body.genre, body.release_year), store,
    )
    response.headers["Location"] = str(
        request.url_for("get_game_by_id", game_id=created.id),
    )
    return created


@router.put("/{game_id:signed_int}", response_model=VideoGameResponse)
async def update_game(
    game_id: int,
    body: GameRequest,
    request: Request,
    store: VideoGameStore = Depends(get_store),
    pipeline: Pipeline = Depends(get_pipeline),
):
    """Replace a game's fields or 404."""
    result = await pipeline.dispatch(
        UpdateGameCommand(game_id, body.title, body.genre, body.release_year),
        store,
    )
    if not isinstance(result, Found):
        return _not_found(request, game_id)
    return result.value


@router.delete("/{game_id:signed_int}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_game(
    game_id: int,
    request: Request,
    store: VideoGameStore = Depends(get_store),
    pipeline: Pipeline = Depends(get_pipeline),
):
    """Delete a game. 204 or 404."""
    result = await pipeline.dispatch(DeleteGameCommand(game_id), store)
    if not isinstance(result, Found):
        return _not_found(request, game_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

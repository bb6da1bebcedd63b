"""Game catalog endpoints.

Shape validation (pagination bounds, body fields, path types) happens in the
signatures and is rejected with 400 before any service call. Domain failures
raised by the service are translated by the exception handlers in main.py.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Path, Response, status

from game_catalog.dependencies import DB, Page
from game_catalog.models import PRICE_MAX, PRICE_MIN
from game_catalog.schemas.game import GameInput, GameResponse
from game_catalog.services import game as service

router = APIRouter(prefix="/jogos", tags=["jogos"])

GameId = Annotated[UUID, Path()]

CATALOG_ERRORS: dict[int | str, dict[str, object]] = {
    status.HTTP_400_BAD_REQUEST: {"description": "Invalid request shape"},
}


@router.get(
    "",
    response_model=list[GameResponse],
    responses={**CATALOG_ERRORS, status.HTTP_204_NO_CONTENT: {"description": "No games"}},
)
async def list_games(db: DB, page: Page) -> list[GameResponse] | Response:
    """List the catalog one page at a time. There is no unpaginated listing."""
    games = await service.list_games(db, page=page.page, page_size=page.page_size)
    if not games:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return [GameResponse.model_validate(game) for game in games]


@router.get(
    "/{game_id}",
    response_model=GameResponse,
    responses={**CATALOG_ERRORS, status.HTTP_204_NO_CONTENT: {"description": "No such game"}},
)
async def get_game(db: DB, game_id: GameId) -> GameResponse | Response:
    game = await service.get_game(db, game_id)
    if game is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return GameResponse.model_validate(game)


@router.post(
    "",
    response_model=GameResponse,
    responses={**CATALOG_ERRORS, 422: {"description": "Duplicate name for this producer"}},
)
async def insert_game(db: DB, body: GameInput) -> GameResponse:
    """Add a game. A second game with the same name for the same producer is refused."""
    game = await service.insert_game(db, body.to_data())
    return GameResponse.model_validate(game)


@router.put(
    "/{game_id}",
    responses={
        **CATALOG_ERRORS,
        status.HTTP_404_NOT_FOUND: {"description": "No such game"},
        422: {"description": "Duplicate name for this producer"},
    },
)
async def update_game(db: DB, game_id: GameId, body: GameInput) -> Response:
    await service.update_game(db, game_id, body.to_data())
    return Response(status_code=status.HTTP_200_OK)


@router.patch(
    "/{game_id}/preco/{preco}",
    responses={**CATALOG_ERRORS, status.HTTP_404_NOT_FOUND: {"description": "No such game"}},
)
async def update_game_price(
    db: DB,
    game_id: GameId,
    preco: Annotated[float, Path(ge=PRICE_MIN, le=PRICE_MAX)],
) -> Response:
    """Change only the price; name and producer are left as they are."""
    await service.update_game_price(db, game_id, preco)
    return Response(status_code=status.HTTP_200_OK)


@router.delete(
    "/{game_id}",
    responses={**CATALOG_ERRORS, status.HTTP_404_NOT_FOUND: {"description": "No such game"}},
)
async def remove_game(db: DB, game_id: GameId) -> Response:
    await service.remove_game(db, game_id)
    return Response(status_code=status.HTTP_200_OK)

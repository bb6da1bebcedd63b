"""Game catalog business logic.

Enforces the rules the repository cannot express on its own:
(name, producer) uniqueness and existence checks before update/delete.
Failures are raised as domain exceptions; routers never see store errors.
"""

from dataclasses import dataclass
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from game_catalog.exceptions import DuplicateGameError, GameNotFoundError
from game_catalog.logging import get_logger
from game_catalog.models import Game
from game_catalog.repositories import game as repo

logger = get_logger(__name__)


@dataclass
class GameData:
    """Validated candidate values for a game, free of any wire format."""

    name: str
    producer: str
    price: float


async def list_games(db: AsyncSession, page: int, page_size: int) -> list[Game]:
    """Return one page of the catalog. Pages start at 1; an empty page is not an error."""
    return await repo.list_games(db, skip=(page - 1) * page_size, limit=page_size)


async def get_game(db: AsyncSession, game_id: UUID) -> Game | None:
    return await repo.get_game(db, game_id)


async def insert_game(db: AsyncSession, candidate: GameData) -> Game:
    """Register a new game.

    Raises DuplicateGameError when the (name, producer) pair is taken, either
    by the pre-check or by the unique constraint when a concurrent insert wins.
    """
    existing = await repo.find_by_name_and_producer(db, candidate.name, candidate.producer)
    if existing is not None:
        logger.info("duplicate_game", name=candidate.name, producer=candidate.producer)
        raise DuplicateGameError(candidate.name, candidate.producer)

    game = Game(name=candidate.name, producer=candidate.producer, price=candidate.price)
    try:
        game = await repo.add_game(db, game)
    except IntegrityError as exc:
        logger.info("duplicate_game", name=candidate.name, producer=candidate.producer)
        raise DuplicateGameError(candidate.name, candidate.producer) from exc

    logger.info("game_created", game_id=str(game.id))
    return game


async def update_game(db: AsyncSession, game_id: UUID, candidate: GameData) -> None:
    """Overwrite name, producer and price of an existing game.

    Moving a game onto the (name, producer) pair of another game is rejected
    with DuplicateGameError, same as on insert.
    """
    game = await _get_existing(db, game_id)

    holder = await repo.find_by_name_and_producer(db, candidate.name, candidate.producer)
    if holder is not None and holder.id != game.id:
        logger.info("duplicate_game", name=candidate.name, producer=candidate.producer)
        raise DuplicateGameError(candidate.name, candidate.producer)

    game.name = candidate.name
    game.producer = candidate.producer
    game.price = candidate.price
    try:
        await repo.save_game(db, game)
    except IntegrityError as exc:
        raise DuplicateGameError(candidate.name, candidate.producer) from exc

    logger.info("game_updated", game_id=str(game_id))


async def update_game_price(db: AsyncSession, game_id: UUID, price: float) -> None:
    """Overwrite only the price of an existing game."""
    game = await _get_existing(db, game_id)
    game.price = price
    await repo.save_game(db, game)
    logger.info("game_price_updated", game_id=str(game_id), price=price)


async def remove_game(db: AsyncSession, game_id: UUID) -> None:
    game = await _get_existing(db, game_id)
    await repo.delete_game(db, game)
    logger.info("game_removed", game_id=str(game_id))


async def _get_existing(db: AsyncSession, game_id: UUID) -> Game:
    game = await repo.get_game(db, game_id)
    if game is None:
        logger.info("game_not_found", game_id=str(game_id))
        raise GameNotFoundError(game_id)
    return game

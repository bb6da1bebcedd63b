"""Game data-access layer.

Pure query functions, no business logic and no HTTP concerns.
Each function takes a session and returns models or scalars.
Writes only flush; the request-scoped session owns the commit.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from game_catalog.models import Game


async def list_games(db: AsyncSession, skip: int, limit: int) -> list[Game]:
    """Return a page of games in insertion order."""
    stmt = select(Game).order_by(Game.created_at, Game.id).offset(skip).limit(limit)
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def get_game(db: AsyncSession, game_id: UUID) -> Game | None:
    return await db.get(Game, game_id)


async def find_by_name_and_producer(db: AsyncSession, name: str, producer: str) -> Game | None:
    """Return the game holding this (name, producer) pair, if any."""
    stmt = select(Game).where(Game.name == name, Game.producer == producer)
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def add_game(db: AsyncSession, game: Game) -> Game:
    """Persist a new game and load its generated columns."""
    db.add(game)
    await db.flush()
    await db.refresh(game)
    return game


async def save_game(db: AsyncSession, game: Game) -> None:
    """Flush pending changes on a persistent game and reload server-set columns."""
    await db.flush()
    await db.refresh(game)


async def delete_game(db: AsyncSession, game: Game) -> None:
    await db.delete(game)
    await db.flush()

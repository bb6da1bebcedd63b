"""Service-level tests: catalog rules applied directly against a session."""

import uuid

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from game_catalog.exceptions import DuplicateGameError, GameNotFoundError
from game_catalog.models import Game
from game_catalog.services import game as service
from game_catalog.services.game import GameData
from tests.factories import make_game


async def count_games(db: AsyncSession) -> int:
    return (await db.execute(select(func.count(Game.id)))).scalar_one()


@pytest.mark.asyncio
async def test_list_games_pages_do_not_overlap(seeded_db: AsyncSession) -> None:
    first = await service.list_games(seeded_db, page=1, page_size=3)
    second = await service.list_games(seeded_db, page=2, page_size=3)
    third = await service.list_games(seeded_db, page=3, page_size=3)

    assert [len(first), len(second), len(third)] == [3, 3, 1]
    ids = {game.id for game in first + second + third}
    assert len(ids) == 7


@pytest.mark.asyncio
async def test_list_games_past_last_page_is_empty(seeded_db: AsyncSession) -> None:
    assert await service.list_games(seeded_db, page=5, page_size=50) == []


@pytest.mark.asyncio
async def test_get_game_absent_returns_none(db: AsyncSession) -> None:
    assert await service.get_game(db, uuid.uuid4()) is None


@pytest.mark.asyncio
async def test_insert_game_assigns_id(db: AsyncSession) -> None:
    game = await service.insert_game(db, GameData("Chrono Trigger", "Square", 59.9))

    assert game.id is not None
    fetched = await service.get_game(db, game.id)
    assert fetched is not None
    assert (fetched.name, fetched.producer, fetched.price) == ("Chrono Trigger", "Square", 59.9)


@pytest.mark.asyncio
async def test_insert_duplicate_raises_and_keeps_count(seeded_db: AsyncSession) -> None:
    with pytest.raises(DuplicateGameError) as excinfo:
        await service.insert_game(seeded_db, GameData("Chrono Trigger", "Square", 10))

    assert excinfo.value.message == "Já existe um jogo com este nome para esta produtora"
    assert await count_games(seeded_db) == 7


@pytest.mark.asyncio
async def test_update_game_overwrites_all_fields(db: AsyncSession) -> None:
    game = make_game()
    db.add(game)
    await db.flush()

    await service.update_game(db, game.id, GameData("Chrono Cross", "Square Enix", 89.9))

    fetched = await service.get_game(db, game.id)
    assert fetched is not None
    assert (fetched.name, fetched.producer, fetched.price) == ("Chrono Cross", "Square Enix", 89.9)


@pytest.mark.asyncio
async def test_update_game_keeping_own_pair_is_allowed(db: AsyncSession) -> None:
    game = make_game(price=59.9)
    db.add(game)
    await db.flush()

    await service.update_game(db, game.id, GameData(game.name, game.producer, 19.9))

    fetched = await service.get_game(db, game.id)
    assert fetched is not None
    assert fetched.price == 19.9


@pytest.mark.asyncio
async def test_update_game_onto_other_pair_raises(db: AsyncSession) -> None:
    taken = make_game(name="Chrono Trigger", producer="Square")
    game = make_game(name="Secret of Mana", producer="Square")
    db.add_all([taken, game])
    await db.flush()

    with pytest.raises(DuplicateGameError):
        await service.update_game(db, game.id, GameData("Chrono Trigger", "Square", 30))

    fetched = await service.get_game(db, game.id)
    assert fetched is not None
    assert fetched.name == "Secret of Mana"


@pytest.mark.asyncio
async def test_update_unknown_game_raises(seeded_db: AsyncSession) -> None:
    missing = uuid.uuid4()

    with pytest.raises(GameNotFoundError) as excinfo:
        await service.update_game(seeded_db, missing, GameData("Chrono Cross", "Square", 20))

    assert excinfo.value.game_id == missing
    assert await count_games(seeded_db) == 7


@pytest.mark.asyncio
async def test_update_price_changes_only_price(db: AsyncSession) -> None:
    game = make_game(name="Super Metroid", producer="Nintendo", price=39.9)
    db.add(game)
    await db.flush()

    await service.update_game_price(db, game.id, 99.0)

    fetched = await service.get_game(db, game.id)
    assert fetched is not None
    assert (fetched.name, fetched.producer, fetched.price) == ("Super Metroid", "Nintendo", 99.0)


@pytest.mark.asyncio
async def test_update_price_unknown_game_raises(db: AsyncSession) -> None:
    with pytest.raises(GameNotFoundError):
        await service.update_game_price(db, uuid.uuid4(), 10)


@pytest.mark.asyncio
async def test_remove_game_deletes_it(seeded_db: AsyncSession) -> None:
    game = (await seeded_db.execute(select(Game).limit(1))).scalar_one()

    await service.remove_game(seeded_db, game.id)

    assert await service.get_game(seeded_db, game.id) is None
    assert await count_games(seeded_db) == 6


@pytest.mark.asyncio
async def test_remove_unknown_game_raises(seeded_db: AsyncSession) -> None:
    with pytest.raises(GameNotFoundError):
        await service.remove_game(seeded_db, uuid.uuid4())

    assert await count_games(seeded_db) == 7

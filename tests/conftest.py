import os
from collections.abc import AsyncIterator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from game_catalog.db.session import Base, get_db
from game_catalog.main import app

# Fixtures in tests/seeds.py are only visible to pytest when registered as a plugin.
pytest_plugins = ["tests.seeds"]

# Point at a throwaway Postgres database to run against the production dialect, e.g.
# TEST_DATABASE_URL=postgresql+asyncpg://catalogo@localhost:5432/catalogo_test
TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite:///./test_catalogo.db")

engine = create_async_engine(TEST_DATABASE_URL, poolclass=NullPool)
async_session = async_sessionmaker(engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def db() -> AsyncIterator[AsyncSession]:
    """Create tables and yield a session, then drop tables after test."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncIterator[AsyncClient]:
    """HTTP client that uses the test database session."""

    async def override_get_db() -> AsyncIterator[AsyncSession]:
        yield db

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def broken_client() -> AsyncIterator[AsyncClient]:
    """HTTP client whose database dependency always fails, as if the store were down."""

    async def unavailable_db() -> AsyncIterator[AsyncSession]:
        raise ConnectionRefusedError("connection to catalog database refused")
        yield  # pragma: no cover

    app.dependency_overrides[get_db] = unavailable_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()

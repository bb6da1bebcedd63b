from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from game_catalog.config import settings

# Predictable constraint names so Alembic autogenerate stays stable across migrations.
NAMING_CONVENTION: dict[str, str] = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Declarative base for every ORM model.

    Base.metadata is what Alembic compares against the live schema,
    so models must inherit from here to be migrated.
    """

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


def _engine_options(url: str) -> dict[str, Any]:
    """Pool and driver options for the configured database URL.

    SQLite (used for local runs and tests) has no server-side pool or
    asyncpg statement timeout, so those options only apply to Postgres.
    """
    options: dict[str, Any] = {"echo": settings.db_echo}
    if url.startswith("sqlite"):
        return options
    options.update(
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_timeout=settings.db_pool_timeout,
        pool_recycle=settings.db_pool_recycle,
        pool_pre_ping=settings.db_pool_pre_ping,
    )
    if "+asyncpg" in url:
        options["connect_args"] = {"command_timeout": settings.db_statement_timeout}
    return options


engine = create_async_engine(settings.database_url, **_engine_options(settings.database_url))

# expire_on_commit=False: attributes stay loaded after commit, no lazy sync I/O.
async_session = async_sessionmaker(engine, expire_on_commit=False)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency that provides a database session per request.

    Commits on success, rolls back on exception. This is the only place that
    owns transaction boundaries; services and repositories just flush.
    """
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def shutdown() -> None:
    """Dispose of the engine's pooled connections. Called from the app lifespan."""
    await engine.dispose()

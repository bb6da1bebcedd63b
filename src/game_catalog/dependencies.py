"""Shared FastAPI dependencies.

Type aliases that routers put in their signatures. Kept out of main.py so
routers can import them without a circular import.
"""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from game_catalog.config import settings
from game_catalog.db.session import get_db

DB = Annotated[AsyncSession, Depends(get_db)]

# Largest page number accepted; keeps the computed offset inside a 32-bit integer range.
MAX_PAGE = 2**31 - 1


@dataclass
class PageParams:
    """1-based page number and page size, already range-checked."""

    page: int
    page_size: int


def page_params(
    pagina: int = Query(1, ge=1, le=MAX_PAGE, description="Página consultada, a partir de 1"),
    quantidade: int = Query(
        settings.default_page_size,
        ge=1,
        le=settings.max_page_size,
        description="Registros por página",
    ),
) -> PageParams:
    return PageParams(page=pagina, page_size=quantidade)


Page = Annotated[PageParams, Depends(page_params)]

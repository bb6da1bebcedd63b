"""SQLAlchemy models.

Every model inherits from Base so Alembic autogenerate can see it.
"""

import uuid
from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, String, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from game_catalog.db.session import Base

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 100
PRICE_MIN = 1
PRICE_MAX = 1000


class Game(Base):
    __tablename__ = "jogos"
    __table_args__ = (
        UniqueConstraint("nome", "produtora", name="uq_jogos_nome_produtora"),
        CheckConstraint(f"preco >= {PRICE_MIN} AND preco <= {PRICE_MAX}", name="preco_range"),
    )

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column("nome", String(NAME_MAX_LENGTH))
    producer: Mapped[str] = mapped_column("produtora", String(NAME_MAX_LENGTH))
    price: Mapped[float] = mapped_column("preco")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    def __repr__(self) -> str:
        return f"Game(id={self.id!s}, name={self.name!r}, producer={self.producer!r})"

"""create jogos table

Revision ID: 0001
Revises:
Create Date: 2026-10-18 00:00:00
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "jogos",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("nome", sa.String(length=100), nullable=False),
        sa.Column("produtora", sa.String(length=100), nullable=False),
        sa.Column("preco", sa.Float(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.CheckConstraint("preco >= 1 AND preco <= 1000", name=op.f("ck_jogos_preco_range")),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_jogos")),
        sa.UniqueConstraint("nome", "produtora", name="uq_jogos_nome_produtora"),
    )


def downgrade() -> None:
    op.drop_table("jogos")

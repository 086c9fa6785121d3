"""create_penulis_and_buku

Revision ID: 3c1d9a7e2b40
Revises:
Create Date: 2026-10-19 09:12:31.402118

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3c1d9a7e2b40"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "Penulis",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "Buku",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.Text(), nullable=True),
        sa.Column("penulisId", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["penulisId"], ["Penulis.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_Buku_penulisId"), "Buku", ["penulisId"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f("ix_Buku_penulisId"), table_name="Buku")
    op.drop_table("Buku")
    op.drop_table("Penulis")

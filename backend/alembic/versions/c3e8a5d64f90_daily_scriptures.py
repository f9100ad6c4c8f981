"""daily_scriptures

Revision ID: c3e8a5d64f90
Revises: b7d2f9a31c42
Create Date: 2026-02-02 00:00:00
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "c3e8a5d64f90"
down_revision: Union[str, Sequence[str], None] = "b7d2f9a31c42"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "daily_scriptures",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("reference", sa.String(length=100), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("theme", sa.String(length=100), nullable=True),
        sa.Column("reflection", sa.Text(), nullable=True),
    )
    op.create_index("ix_daily_scriptures_date", "daily_scriptures", ["date"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_daily_scriptures_date", table_name="daily_scriptures")
    op.drop_table("daily_scriptures")

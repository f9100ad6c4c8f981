"""members + member_spiritual_profiles

Revision ID: a1c4e7b20d11
Revises:
Create Date: 2026-01-12 00:00:00
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "a1c4e7b20d11"
down_revision: Union[str, Sequence[str], None] = None
branch_labels = None
depends_on = None

membertier = sa.Enum("free", "partner", "covenant", name="membertier")


def upgrade() -> None:
    op.create_table(
        "members",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("first_name", sa.String(length=100), nullable=False),
        sa.Column("last_name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=40), nullable=True),
        sa.Column("occupation", sa.String(length=200), nullable=True),
        sa.Column("tier", membertier, nullable=False, server_default="free"),
        sa.Column("date_of_birth", sa.Date(), nullable=True),
        sa.Column("wedding_anniversary", sa.Date(), nullable=True),
        sa.Column("membership_date", sa.Date(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    op.create_index("ix_members_id", "members", ["id"])
    op.create_index("ix_members_email", "members", ["email"], unique=True)

    op.create_table(
        "member_spiritual_profiles",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "member_id",
            sa.Integer(),
            sa.ForeignKey("members.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("primary_gift", sa.String(length=100), nullable=True),
        sa.Column("current_season", sa.String(length=100), nullable=True),
        sa.Column("total_devotionals_read", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("total_journal_entries", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("total_prayers_submitted", sa.Integer(), nullable=False, server_default="0"),
    )
    op.create_index(
        "ix_member_spiritual_profiles_member_id",
        "member_spiritual_profiles",
        ["member_id"],
        unique=True,
    )


def downgrade() -> None:
    op.drop_index("ix_member_spiritual_profiles_member_id", table_name="member_spiritual_profiles")
    op.drop_table("member_spiritual_profiles")
    op.drop_index("ix_members_email", table_name="members")
    op.drop_index("ix_members_id", table_name="members")
    op.drop_table("members")
    membertier.drop(op.get_bind(), checkfirst=True)

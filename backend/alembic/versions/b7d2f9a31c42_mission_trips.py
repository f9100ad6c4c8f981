"""mission trips: trips, participants, daily focus

Revision ID: b7d2f9a31c42
Revises: a1c4e7b20d11
Create Date: 2026-01-19 00:00:00
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "b7d2f9a31c42"
down_revision: Union[str, Sequence[str], None] = "a1c4e7b20d11"
branch_labels = None
depends_on = None

applicationstatus = sa.Enum(
    "pending", "approved", "waitlisted", "rejected", name="applicationstatus"
)


def upgrade() -> None:
    op.create_table(
        "mission_trips",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("destination", sa.String(length=200), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("fundraising_goal", sa.Numeric(12, 2), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    op.create_index("ix_mission_trips_id", "mission_trips", ["id"])

    op.create_table(
        "trip_participants",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "trip_id",
            sa.Integer(),
            sa.ForeignKey("mission_trips.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "member_id",
            sa.Integer(),
            sa.ForeignKey("members.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("first_name", sa.String(length=100), nullable=False),
        sa.Column("last_name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=40), nullable=True),
        sa.Column("service_track", sa.String(length=40), nullable=True),
        sa.Column("application_status", applicationstatus, nullable=False, server_default="pending"),
        sa.Column("team_leader", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("fundraising_goal", sa.Numeric(12, 2), nullable=False, server_default="0"),
        sa.Column("amount_raised", sa.Numeric(12, 2), nullable=False, server_default="0"),
        sa.Column("passport_status", sa.String(length=20), nullable=True),
        sa.Column("visa_status", sa.String(length=20), nullable=True),
        sa.Column("payment_status", sa.String(length=20), nullable=True),
        sa.Column("emergency_contact_name", sa.String(length=200), nullable=True),
        sa.Column("emergency_contact_phone", sa.String(length=40), nullable=True),
        sa.Column("emergency_contact_relationship", sa.String(length=100), nullable=True),
        sa.Column("allergies", sa.Text(), nullable=True),
        sa.Column("medications", sa.Text(), nullable=True),
        sa.Column("medical_conditions", sa.Text(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("scholarship_requested", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.UniqueConstraint("trip_id", "member_id", name="uq_trip_participants_trip_member"),
    )
    op.create_index("ix_trip_participants_id", "trip_participants", ["id"])
    op.create_index("ix_trip_participants_trip_id", "trip_participants", ["trip_id"])
    op.create_index("ix_trip_participants_member_id", "trip_participants", ["member_id"])
    op.create_index("ix_trip_participants_service_track", "trip_participants", ["service_track"])

    op.create_table(
        "trip_daily_focus",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "trip_id",
            sa.Integer(),
            sa.ForeignKey("mission_trips.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("focus_date", sa.Date(), nullable=False),
        sa.Column("theme", sa.String(length=200), nullable=False),
        sa.Column("scripture_reference", sa.String(length=100), nullable=True),
        sa.Column("prayer_focus", sa.Text(), nullable=True),
        sa.UniqueConstraint("trip_id", "focus_date", name="uq_trip_daily_focus_trip_date"),
    )
    op.create_index("ix_trip_daily_focus_trip_id", "trip_daily_focus", ["trip_id"])


def downgrade() -> None:
    op.drop_index("ix_trip_daily_focus_trip_id", table_name="trip_daily_focus")
    op.drop_table("trip_daily_focus")

    for ix in (
        "ix_trip_participants_service_track",
        "ix_trip_participants_member_id",
        "ix_trip_participants_trip_id",
        "ix_trip_participants_id",
    ):
        op.drop_index(ix, table_name="trip_participants")
    op.drop_table("trip_participants")

    op.drop_index("ix_mission_trips_id", table_name="mission_trips")
    op.drop_table("mission_trips")
    applicationstatus.drop(op.get_bind(), checkfirst=True)

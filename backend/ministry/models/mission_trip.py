# backend/ministry/models/mission_trip.py
"""Short-term mission trip, its applicants/participants and daily prayer focus."""
from __future__ import annotations

import enum
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import (
    Boolean,
    Date,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ministry.db import Base


class ApplicationStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    WAITLISTED = "waitlisted"
    REJECTED = "rejected"


class MissionTrip(Base):
    __tablename__ = "mission_trips"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    destination: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    fundraising_goal: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    participants: Mapped[List["TripParticipant"]] = relationship(
        back_populates="trip", lazy="selectin", cascade="all, delete-orphan"
    )
    daily_focus: Mapped[List["TripDailyFocus"]] = relationship(
        back_populates="trip",
        lazy="selectin",
        cascade="all, delete-orphan",
        order_by="TripDailyFocus.focus_date",
    )


class TripParticipant(Base):
    __tablename__ = "trip_participants"
    __table_args__ = (
        UniqueConstraint("trip_id", "member_id", name="uq_trip_participants_trip_member"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    trip_id: Mapped[int] = mapped_column(
        ForeignKey("mission_trips.id", ondelete="CASCADE"), nullable=False, index=True
    )
    member_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("members.id", ondelete="SET NULL"), nullable=True, index=True
    )

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(String(40), nullable=True)

    # One of the six service tracks, or NULL when none chosen/recommended
    service_track: Mapped[Optional[str]] = mapped_column(String(40), nullable=True, index=True)
    application_status: Mapped[ApplicationStatus] = mapped_column(
        Enum(
            ApplicationStatus,
            name="applicationstatus",
            values_callable=lambda e: [m.value for m in e],
        ),
        nullable=False,
        default=ApplicationStatus.PENDING,
    )
    team_leader: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    fundraising_goal: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=0)
    amount_raised: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=0)

    passport_status: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)  # verified, ...
    visa_status: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)      # approved, ...
    payment_status: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)   # paid, ...

    emergency_contact_name: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    emergency_contact_phone: Mapped[Optional[str]] = mapped_column(String(40), nullable=True)
    emergency_contact_relationship: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    allergies: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    medications: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    medical_conditions: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)

    notes: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    scholarship_requested: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    trip: Mapped[MissionTrip] = relationship(back_populates="participants")


class TripDailyFocus(Base):
    __tablename__ = "trip_daily_focus"
    __table_args__ = (
        UniqueConstraint("trip_id", "focus_date", name="uq_trip_daily_focus_trip_date"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    trip_id: Mapped[int] = mapped_column(
        ForeignKey("mission_trips.id", ondelete="CASCADE"), nullable=False, index=True
    )
    focus_date: Mapped[date] = mapped_column(Date, nullable=False)
    theme: Mapped[str] = mapped_column(String(200), nullable=False)
    scripture_reference: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    prayer_focus: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)

    trip: Mapped[MissionTrip] = relationship(back_populates="daily_focus")

# backend/ministry/models/members.py
"""SQLAlchemy models for church members and their spiritual-activity counters.

The counters on MemberSpiritualProfile are incremented by activity logging
elsewhere; the engagement scorer only reads them.
"""
from __future__ import annotations

import enum
from datetime import date, datetime
from typing import Optional

from sqlalchemy import Date, DateTime, Enum, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ministry.db import Base


class MemberTier(str, enum.Enum):
    """Membership level gating content access."""
    FREE = "free"
    PARTNER = "partner"
    COVENANT = "covenant"


class Member(Base):
    __tablename__ = "members"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    phone: Mapped[Optional[str]] = mapped_column(String(40), nullable=True)
    occupation: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)

    tier: Mapped[MemberTier] = mapped_column(
        Enum(MemberTier, name="membertier", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=MemberTier.FREE,
    )

    # Recurring dates (year kept for age / years-together arithmetic)
    date_of_birth: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    wedding_anniversary: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    membership_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    spiritual_profile: Mapped[Optional["MemberSpiritualProfile"]] = relationship(
        back_populates="member",
        uselist=False,
        lazy="selectin",
        cascade="all, delete-orphan",
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __repr__(self) -> str:
        return f"<Member id={self.id} name={self.full_name!r}>"


class MemberSpiritualProfile(Base):
    __tablename__ = "member_spiritual_profiles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    member_id: Mapped[int] = mapped_column(
        ForeignKey("members.id", ondelete="CASCADE"), nullable=False, unique=True, index=True
    )

    primary_gift: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    current_season: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    total_devotionals_read: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_journal_entries: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_prayers_submitted: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    member: Mapped[Member] = relationship(back_populates="spiritual_profile")

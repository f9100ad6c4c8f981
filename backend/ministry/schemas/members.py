# backend/ministry/schemas/members.py
from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, constr

from ministry.models.members import MemberTier

Email = constr(strip_whitespace=True, to_lower=True, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")


class MemberBase(BaseModel):
    first_name: constr(strip_whitespace=True, min_length=1, max_length=100)
    last_name: constr(strip_whitespace=True, min_length=1, max_length=100)
    email: Email
    phone: Optional[str] = Field(None, max_length=40)
    occupation: Optional[str] = Field(None, max_length=200)
    tier: MemberTier = MemberTier.FREE
    date_of_birth: Optional[date] = None
    wedding_anniversary: Optional[date] = None
    membership_date: Optional[date] = None

    # Pydantic v2: allows ORM objects to be returned directly
    model_config = ConfigDict(from_attributes=True)


class MemberCreate(MemberBase):
    pass


class MemberUpdate(BaseModel):
    first_name: Optional[constr(strip_whitespace=True, min_length=1, max_length=100)] = None
    last_name: Optional[constr(strip_whitespace=True, min_length=1, max_length=100)] = None
    email: Optional[Email] = None
    phone: Optional[str] = Field(None, max_length=40)
    occupation: Optional[str] = Field(None, max_length=200)
    tier: Optional[MemberTier] = None
    date_of_birth: Optional[date] = None
    wedding_anniversary: Optional[date] = None
    membership_date: Optional[date] = None


class SpiritualProfileBase(BaseModel):
    primary_gift: Optional[str] = Field(None, max_length=100)
    current_season: Optional[str] = Field(None, max_length=100)
    total_devotionals_read: int = Field(0, ge=0)
    total_journal_entries: int = Field(0, ge=0)
    total_prayers_submitted: int = Field(0, ge=0)

    model_config = ConfigDict(from_attributes=True)


class SpiritualProfileUpsert(SpiritualProfileBase):
    pass


class SpiritualProfileRead(SpiritualProfileBase):
    member_id: int


class MemberRead(MemberBase):
    id: int
    created_at: datetime
    spiritual_profile: Optional[SpiritualProfileRead] = None

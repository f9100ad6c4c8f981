# backend/ministry/schemas/mission_trip.py
from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ministry.models.mission_trip import ApplicationStatus
from ministry.services.service_tracks import TRACK_VALUES


# ---------- Trips ----------

class MissionTripBase(BaseModel):
    name: str = Field(..., max_length=200)
    destination: Optional[str] = Field(None, max_length=200)
    start_date: date
    end_date: date
    fundraising_goal: Decimal = Field(Decimal("0"), ge=0)

    model_config = ConfigDict(from_attributes=True)

    @model_validator(mode="after")
    def _end_after_start(self) -> "MissionTripBase":
        if self.end_date < self.start_date:
            raise ValueError("end_date must be on or after start_date.")
        return self


class MissionTripCreate(MissionTripBase):
    pass


class MissionTripRead(MissionTripBase):
    id: int
    created_at: datetime


# ---------- Participants ----------

class TripApplicationCreate(BaseModel):
    """Application form payload. Omitted identity fields come from the member row."""
    member_id: Optional[int] = None
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    email: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=40)

    # None -> recommended from the member's occupation
    service_track: Optional[str] = None

    why_interested: Optional[str] = None
    previous_missions: Optional[str] = None
    special_skills: Optional[str] = None
    dietary_restrictions: Optional[str] = None

    emergency_contact_name: Optional[str] = Field(None, max_length=200)
    emergency_contact_phone: Optional[str] = Field(None, max_length=40)
    emergency_contact_relationship: Optional[str] = Field(None, max_length=100)
    allergies: Optional[str] = None
    medications: Optional[str] = None
    medical_conditions: Optional[str] = None

    needs_scholarship: bool = False
    scholarship_reason: Optional[str] = None

    @field_validator("service_track")
    @classmethod
    def _known_track(cls, v: Optional[str]) -> Optional[str]:
        if v is None or v == "":
            return v
        if v not in TRACK_VALUES:
            raise ValueError(f"Unknown service track: {v!r}")
        return v


class TripParticipantRead(BaseModel):
    id: int
    trip_id: int
    member_id: Optional[int] = None
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    service_track: Optional[str] = None
    application_status: ApplicationStatus
    team_leader: bool
    fundraising_goal: Decimal
    amount_raised: Decimal
    fundraising_percent: int
    passport_status: Optional[str] = None
    visa_status: Optional[str] = None
    payment_status: Optional[str] = None
    notes: Optional[str] = None
    scholarship_requested: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class TripStatsRead(BaseModel):
    total_participants: int
    approved_participants: int
    pending_applications: int
    team_leaders: int
    total_raised: Decimal
    fundraising_goal: Decimal
    fundraising_percent: int
    passports_verified: int
    visas_approved: int
    fully_paid: int
    days_until_trip: int


class TrackRecommendationRead(BaseModel):
    member_id: int
    recommended_track: str          # "" when nothing matches
    recommended_label: Optional[str] = None
    message: str
    scholarship_eligible: bool
    scholarship_reasons: List[str]


# ---------- Daily focus ----------

class DailyFocusCreate(BaseModel):
    focus_date: date
    theme: str = Field(..., max_length=200)
    scripture_reference: Optional[str] = Field(None, max_length=100)
    prayer_focus: Optional[str] = None


class DailyFocusRead(DailyFocusCreate):
    id: int
    trip_id: int

    model_config = ConfigDict(from_attributes=True)

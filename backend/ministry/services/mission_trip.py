# backend/ministry/services/mission_trip.py
"""Mission-trip command center: applications, fundraising and countdown figures."""
from __future__ import annotations

import logging
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import and_, select
from sqlalchemy.orm import Session

from ministry.models.members import Member
from ministry.models.mission_trip import (
    ApplicationStatus,
    MissionTrip,
    TripDailyFocus,
    TripParticipant,
)
from ministry.schemas.mission_trip import (
    DailyFocusCreate,
    MissionTripCreate,
    TripApplicationCreate,
    TripParticipantRead,
)
from ministry.services.service_tracks import recommend_track

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Figures
# ─────────────────────────────────────────────────────────────────────────────

def _dec(x: Any) -> Decimal:
    if x is None:
        return Decimal("0")
    if isinstance(x, Decimal):
        return x
    return Decimal(str(x))


def fundraising_percent(amount_raised: Any, goal: Any) -> int:
    """Whole percent of ``goal`` raised, half rounded up; 0 without a goal.

    Not capped at 100: over-funded participants report e.g. 120.
    """
    goal_d = _dec(goal)
    if goal_d <= 0:
        return 0
    pct = _dec(amount_raised) / goal_d * 100
    return int(pct.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def days_until_trip(start_date: date, today: date) -> int:
    """Negative once the trip is under way."""
    return (start_date - today).days


def trip_stats(
    trip: MissionTrip,
    participants: Iterable[TripParticipant],
    today: date,
) -> Dict[str, Any]:
    p = list(participants)
    total_raised = sum((_dec(x.amount_raised) for x in p), Decimal("0"))
    goal = _dec(trip.fundraising_goal)

    return {
        "total_participants": len(p),
        "approved_participants": sum(1 for x in p if x.application_status == ApplicationStatus.APPROVED),
        "pending_applications": sum(1 for x in p if x.application_status == ApplicationStatus.PENDING),
        "team_leaders": sum(1 for x in p if x.team_leader),
        "total_raised": total_raised,
        "fundraising_goal": goal,
        "fundraising_percent": fundraising_percent(total_raised, goal),
        "passports_verified": sum(1 for x in p if x.passport_status == "verified"),
        "visas_approved": sum(1 for x in p if x.visa_status == "approved"),
        "fully_paid": sum(1 for x in p if x.payment_status == "paid"),
        "days_until_trip": days_until_trip(trip.start_date, today),
    }


def todays_focus(rows: Iterable[TripDailyFocus], today: date) -> Optional[TripDailyFocus]:
    for row in rows:
        if row.focus_date == today:
            return row
    return None


# ─────────────────────────────────────────────────────────────────────────────
# Trips
# ─────────────────────────────────────────────────────────────────────────────

def create_trip(db: Session, data: MissionTripCreate) -> MissionTrip:
    trip = MissionTrip(**data.model_dump())
    db.add(trip)
    db.commit()
    db.refresh(trip)
    return trip


def get_trip(db: Session, trip_id: int) -> Optional[MissionTrip]:
    return db.get(MissionTrip, trip_id)


def add_daily_focus(db: Session, trip: MissionTrip, data: DailyFocusCreate) -> TripDailyFocus:
    row = TripDailyFocus(trip_id=trip.id, **data.model_dump())
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


# ─────────────────────────────────────────────────────────────────────────────
# Applications
# ─────────────────────────────────────────────────────────────────────────────

def _application_notes(payload: TripApplicationCreate) -> Optional[str]:
    parts = [
        payload.why_interested and f"Why interested: {payload.why_interested}",
        payload.previous_missions and f"Previous missions: {payload.previous_missions}",
        payload.special_skills and f"Special skills: {payload.special_skills}",
        payload.dietary_restrictions and f"Dietary restrictions: {payload.dietary_restrictions}",
        payload.needs_scholarship
        and f"Scholarship requested: {payload.scholarship_reason or 'Yes'}",
    ]
    return "\n\n".join(p for p in parts if p) or None


def apply_to_trip(
    db: Session,
    trip: MissionTrip,
    member: Optional[Member],
    payload: TripApplicationCreate,
) -> TripParticipant:
    """Create a pending participant row.

    Without an explicit track the member's occupation picks one; a blank
    recommendation is stored as NULL. Raises ValueError when neither the
    payload nor the member supplies a name and email.
    """
    track = payload.service_track
    if track is None and member is not None:
        track = recommend_track(member.occupation)
        logger.info("recommended track %r for member %s", track, member.id)

    first_name = payload.first_name or (member.first_name if member else None)
    last_name = payload.last_name or (member.last_name if member else None)
    email = payload.email or (member.email if member else None)
    if not (first_name and last_name and email):
        raise ValueError("first_name, last_name and email are required")

    participant = TripParticipant(
        trip_id=trip.id,
        member_id=member.id if member else None,
        first_name=first_name,
        last_name=last_name,
        email=email,
        phone=payload.phone or (member.phone if member else None),
        service_track=track or None,
        emergency_contact_name=payload.emergency_contact_name or None,
        emergency_contact_phone=payload.emergency_contact_phone or None,
        emergency_contact_relationship=payload.emergency_contact_relationship or None,
        allergies=payload.allergies or None,
        medications=payload.medications or None,
        medical_conditions=payload.medical_conditions or None,
        notes=_application_notes(payload),
        scholarship_requested=payload.needs_scholarship,
        application_status=ApplicationStatus.PENDING,
    )
    db.add(participant)
    db.commit()
    db.refresh(participant)
    return participant


def list_participants(
    db: Session,
    trip_id: int,
    service_track: Optional[str] = None,
    status: Optional[ApplicationStatus] = None,
) -> List[TripParticipant]:
    conds = [TripParticipant.trip_id == trip_id]
    if service_track:
        conds.append(TripParticipant.service_track == service_track)
    if status is not None:
        conds.append(TripParticipant.application_status == status)

    stmt = (
        select(TripParticipant)
        .where(and_(*conds))
        .order_by(TripParticipant.last_name.asc(), TripParticipant.first_name.asc())
    )
    return list(db.execute(stmt).scalars().all())


def to_participant_read(p: TripParticipant) -> TripParticipantRead:
    data = {k: getattr(p, k) for k in TripParticipantRead.model_fields if k != "fundraising_percent"}
    data["fundraising_percent"] = fundraising_percent(p.amount_raised, p.fundraising_goal)
    return TripParticipantRead.model_validate(data)

# backend/ministry/api/mission_trips.py
from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ministry.dependencies import get_db, get_today
from ministry.models.mission_trip import ApplicationStatus, MissionTrip
from ministry.schemas.mission_trip import (
    DailyFocusCreate,
    DailyFocusRead,
    MissionTripCreate,
    MissionTripRead,
    TrackRecommendationRead,
    TripApplicationCreate,
    TripParticipantRead,
    TripStatsRead,
)
from ministry.services import mission_trip as svc
from ministry.services import service_tracks
from ministry.services.members import get_member

router = APIRouter(prefix="/mission-trips", tags=["Mission Trips"])
logger = logging.getLogger(__name__)

# ─────────────────────────────────────────────────────────────────────────────
# OpenAPI "examples" for the application body
# ─────────────────────────────────────────────────────────────────────────────
APPLY_EXAMPLES = {
    "member": {
        "summary": "Member application (track recommended from occupation)",
        "value": {
            "member_id": 1,
            "why_interested": "Called to serve in East Africa",
            "emergency_contact_name": "Jane Doe",
            "emergency_contact_phone": "555-0100",
            "emergency_contact_relationship": "Spouse",
        },
    },
    "guest": {
        "summary": "Guest application with explicit track",
        "value": {
            "first_name": "John",
            "last_name": "Doe",
            "email": "john@example.org",
            "service_track": "food_security",
            "needs_scholarship": True,
            "scholarship_reason": "Student",
        },
    },
}


def _trip_or_404(db: Session, trip_id: int) -> MissionTrip:
    trip = svc.get_trip(db, trip_id)
    if not trip:
        raise HTTPException(status_code=404, detail="Trip not found")
    return trip


@router.post("/", response_model=MissionTripRead, status_code=status.HTTP_201_CREATED)
def create_trip(payload: MissionTripCreate, db: Session = Depends(get_db)) -> MissionTripRead:
    trip = svc.create_trip(db, payload)
    logger.info("create_trip id=%s start=%s", trip.id, trip.start_date)
    return trip


@router.get("/{trip_id}", response_model=MissionTripRead)
def get_trip(trip_id: int, db: Session = Depends(get_db)) -> MissionTripRead:
    return _trip_or_404(db, trip_id)


@router.get("/{trip_id}/stats", response_model=TripStatsRead)
def trip_stats(
    trip_id: int,
    today: date = Depends(get_today),
    db: Session = Depends(get_db),
) -> TripStatsRead:
    trip = _trip_or_404(db, trip_id)
    return svc.trip_stats(trip, trip.participants, today)


@router.post(
    "/{trip_id}/participants",
    response_model=TripParticipantRead,
    status_code=status.HTTP_201_CREATED,
    openapi_extra={"requestBody": {"content": {"application/json": {"examples": APPLY_EXAMPLES}}}},
)
def apply(
    trip_id: int,
    payload: TripApplicationCreate,
    db: Session = Depends(get_db),
) -> TripParticipantRead:
    trip = _trip_or_404(db, trip_id)

    member = None
    if payload.member_id is not None:
        member = get_member(db, payload.member_id)
        if not member:
            raise HTTPException(status_code=404, detail="Member not found")

    try:
        participant = svc.apply_to_trip(db, trip, member, payload)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="Member has already applied to this trip")

    logger.info(
        "apply trip_id=%s participant_id=%s track=%s",
        trip_id,
        participant.id,
        participant.service_track,
    )
    return svc.to_participant_read(participant)


@router.get("/{trip_id}/participants", response_model=List[TripParticipantRead])
def list_participants(
    trip_id: int,
    track: Optional[str] = Query(None, description="Filter by service track"),
    status_: Optional[ApplicationStatus] = Query(None, alias="status"),
    db: Session = Depends(get_db),
) -> List[TripParticipantRead]:
    _trip_or_404(db, trip_id)
    rows = svc.list_participants(db, trip_id, service_track=track, status=status_)
    return [svc.to_participant_read(p) for p in rows]


@router.get("/{trip_id}/recommendation/{member_id}", response_model=TrackRecommendationRead)
def recommendation(
    trip_id: int,
    member_id: int,
    today: date = Depends(get_today),
    db: Session = Depends(get_db),
) -> TrackRecommendationRead:
    _trip_or_404(db, trip_id)
    member = get_member(db, member_id)
    if not member:
        raise HTTPException(status_code=404, detail="Member not found")

    track = service_tracks.recommend_track(member.occupation)
    member_since = member.membership_date or (member.created_at.date() if member.created_at else None)
    eligible, reasons = service_tracks.scholarship_eligibility(
        member.date_of_birth, member.occupation, member_since, today
    )
    return TrackRecommendationRead(
        member_id=member.id,
        recommended_track=track,
        recommended_label=service_tracks.track_label(track),
        message=service_tracks.personalized_message(member.first_name, member.occupation),
        scholarship_eligible=eligible,
        scholarship_reasons=reasons,
    )


@router.post(
    "/{trip_id}/daily-focus",
    response_model=DailyFocusRead,
    status_code=status.HTTP_201_CREATED,
)
def add_daily_focus(
    trip_id: int,
    payload: DailyFocusCreate,
    db: Session = Depends(get_db),
) -> DailyFocusRead:
    trip = _trip_or_404(db, trip_id)
    try:
        return svc.add_daily_focus(db, trip, payload)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="Daily focus already set for this date")


@router.get("/{trip_id}/daily-focus/today", response_model=Optional[DailyFocusRead])
def daily_focus_today(
    trip_id: int,
    today: date = Depends(get_today),
    db: Session = Depends(get_db),
) -> Optional[DailyFocusRead]:
    trip = _trip_or_404(db, trip_id)
    return svc.todays_focus(trip.daily_focus, today)

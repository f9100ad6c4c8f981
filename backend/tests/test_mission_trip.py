from datetime import date, datetime
from decimal import Decimal
from types import SimpleNamespace

from ministry.models.mission_trip import ApplicationStatus
from ministry.schemas.mission_trip import TripApplicationCreate
from ministry.services.mission_trip import (
    _application_notes,
    days_until_trip,
    fundraising_percent,
    to_participant_read,
    todays_focus,
    trip_stats,
)


def _participant(**kw):
    base = dict(
        application_status=ApplicationStatus.PENDING,
        team_leader=False,
        amount_raised=Decimal("0"),
        passport_status=None,
        visa_status=None,
        payment_status=None,
    )
    base.update(kw)
    return SimpleNamespace(**base)


def test_fundraising_percent_rounds_half_up():
    assert fundraising_percent(Decimal("500"), Decimal("4000")) == 13   # 12.5
    assert fundraising_percent(1, 3) == 33
    assert fundraising_percent(2, 3) == 67


def test_fundraising_percent_without_goal_is_zero():
    assert fundraising_percent(100, 0) == 0
    assert fundraising_percent(100, None) == 0
    assert fundraising_percent(None, 100) == 0


def test_fundraising_percent_not_capped():
    assert fundraising_percent(3600, 3000) == 120


def test_days_until_trip():
    assert days_until_trip(date(2026, 4, 22), date(2026, 4, 1)) == 21
    assert days_until_trip(date(2026, 4, 22), date(2026, 4, 22)) == 0
    assert days_until_trip(date(2026, 4, 22), date(2026, 4, 25)) == -3


def test_trip_stats():
    trip = SimpleNamespace(start_date=date(2026, 4, 22), fundraising_goal=Decimal("10000"))
    participants = [
        _participant(application_status=ApplicationStatus.APPROVED, team_leader=True,
                     amount_raised=Decimal("2500"), passport_status="verified",
                     visa_status="approved", payment_status="paid"),
        _participant(application_status=ApplicationStatus.APPROVED, amount_raised=Decimal("1000"),
                     passport_status="pending"),
        _participant(amount_raised=None),
    ]
    stats = trip_stats(trip, participants, today=date(2026, 3, 23))

    assert stats == {
        "total_participants": 3,
        "approved_participants": 2,
        "pending_applications": 1,
        "team_leaders": 1,
        "total_raised": Decimal("3500"),
        "fundraising_goal": Decimal("10000"),
        "fundraising_percent": 35,
        "passports_verified": 1,
        "visas_approved": 1,
        "fully_paid": 1,
        "days_until_trip": 30,
    }


def test_todays_focus():
    rows = [
        SimpleNamespace(focus_date=date(2026, 4, 22), theme="Arrival"),
        SimpleNamespace(focus_date=date(2026, 4, 23), theme="Orientation"),
    ]
    assert todays_focus(rows, date(2026, 4, 23)).theme == "Orientation"
    assert todays_focus(rows, date(2026, 5, 1)) is None


def test_application_notes():
    payload = TripApplicationCreate(
        why_interested="Serve",
        special_skills="Guitar",
        needs_scholarship=True,
    )
    assert _application_notes(payload) == (
        "Why interested: Serve\n\nSpecial skills: Guitar\n\nScholarship requested: Yes"
    )
    assert _application_notes(TripApplicationCreate()) is None


def test_participant_read_carries_fundraising_percent():
    row = SimpleNamespace(
        id=7,
        trip_id=1,
        member_id=None,
        first_name="John",
        last_name="Doe",
        email="john@example.org",
        phone=None,
        service_track="food_security",
        application_status=ApplicationStatus.APPROVED,
        team_leader=False,
        fundraising_goal=Decimal("3000"),
        amount_raised=Decimal("3600"),
        passport_status="verified",
        visa_status=None,
        payment_status=None,
        notes=None,
        scholarship_requested=False,
        created_at=datetime(2025, 6, 1, 12, 0),
    )
    read = to_participant_read(row)
    assert read.id == 7
    assert read.fundraising_percent == 120
    assert read.application_status == ApplicationStatus.APPROVED

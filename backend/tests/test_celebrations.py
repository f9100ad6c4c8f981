from datetime import date
from types import SimpleNamespace

from ministry.services.celebrations import (
    celebration_stats,
    countdown_label,
    days_until,
    greeting,
    is_this_week,
    is_upcoming,
    next_occurrence,
    turning_years,
    upcoming_celebrations,
)

TODAY = date(2025, 6, 10)


def _member(id, first_name, date_of_birth=None, wedding_anniversary=None, membership_date=None):
    return SimpleNamespace(
        id=id,
        first_name=first_name,
        last_name="Smith",
        email=f"{first_name.lower()}@example.org",
        phone=None,
        date_of_birth=date_of_birth,
        wedding_anniversary=wedding_anniversary,
        membership_date=membership_date,
    )


def test_birthday_later_this_week():
    dob = date(1990, 6, 15)
    assert next_occurrence(dob, TODAY) == date(2025, 6, 15)
    days = days_until(dob, TODAY)
    assert days == 5
    assert is_upcoming(days)
    assert is_this_week(days)


def test_birthday_already_passed_rolls_to_next_year():
    dob = date(1990, 6, 1)
    assert next_occurrence(dob, TODAY) == date(2026, 6, 1)
    days = days_until(dob, TODAY)
    assert days > 300
    assert not is_upcoming(days)


def test_birthday_today_is_zero_days():
    dob = date(1990, 6, 10)
    assert next_occurrence(dob, TODAY) == TODAY
    assert days_until(dob, TODAY) == 0
    assert countdown_label(0) == "Today!"


def test_leap_day_birthday_falls_on_march_first():
    dob = date(2000, 2, 29)
    assert next_occurrence(dob, date(2025, 2, 20)) == date(2025, 3, 1)
    assert next_occurrence(dob, date(2024, 2, 20)) == date(2024, 2, 29)
    assert days_until(dob, date(2025, 3, 2)) == (date(2026, 3, 1) - date(2025, 3, 2)).days


def test_turning_years_is_next_birthday_age():
    # not yet had this year's birthday: 34 completed, turning 35
    assert turning_years(date(1990, 6, 15), TODAY) == 35
    # birthday passed on 1 June: 35 completed, next one is 36
    assert turning_years(date(1990, 6, 1), TODAY) == 36


def test_turning_years_leap_day_before_march_first():
    # next_occurrence puts the 2025 birthday on 1 March: the 25th
    assert turning_years(date(2000, 2, 29), date(2025, 2, 28)) == 25


def test_labels():
    assert countdown_label(1) == "Tomorrow"
    assert countdown_label(12) == "12 days"


def test_upcoming_filters_missing_and_far_dates_and_sorts():
    members = [
        _member(1, "Far", date_of_birth=date(1980, 12, 25)),
        _member(2, "Soon", date_of_birth=date(1985, 6, 20)),
        _member(3, "None"),
        _member(4, "Sooner", date_of_birth=date(1999, 6, 11)),
        _member(5, "Edge", date_of_birth=date(1970, 7, 10)),   # exactly 30 days
        _member(6, "Past", date_of_birth=date(1970, 7, 11)),   # 31 days
    ]
    rows = upcoming_celebrations(members, TODAY, "birthday")

    assert [r["member_id"] for r in rows] == [4, 2, 5]
    assert rows[0]["label"] == "Tomorrow"
    assert rows[0]["turning"] == 26
    assert rows[0]["this_week"] is True
    assert rows[1]["this_week"] is False
    assert rows[2]["days_until"] == 30
    assert rows[0]["message"].startswith("Happy Birthday, Sooner!")


def test_anniversaries_use_wedding_date():
    members = [
        _member(1, "Ann", date_of_birth=date(1990, 6, 12), wedding_anniversary=date(2015, 6, 14)),
    ]
    rows = upcoming_celebrations(members, TODAY, "anniversary")
    assert len(rows) == 1
    assert rows[0]["date"] == date(2015, 6, 14)
    assert rows[0]["turning"] == 10
    assert rows[0]["message"] == greeting("anniversary", "Ann")


def test_stats():
    members = [
        _member(1, "A", date_of_birth=date(1990, 6, 12)),
        _member(2, "B", date_of_birth=date(1990, 7, 1), wedding_anniversary=date(2000, 6, 30)),
        _member(3, "C", membership_date=date(2015, 6, 20)),   # 10 years
        _member(4, "D", membership_date=date(2022, 6, 20)),   # 3 years
    ]
    assert celebration_stats(members, TODAY) == {
        "birthdays_this_week": 1,
        "birthdays_upcoming": 2,
        "anniversaries_this_week": 0,
        "anniversaries_upcoming": 1,
        "membership_milestones": 1,
    }


def test_idempotent():
    members = [_member(1, "A", date_of_birth=date(1990, 6, 12))]
    assert upcoming_celebrations(members, TODAY) == upcoming_celebrations(members, TODAY)


def test_membership_milestone_counted_on_the_day():
    members = [_member(1, "A", membership_date=date(2020, 6, 10))]   # 5 years today
    assert celebration_stats(members, TODAY)["membership_milestones"] == 1

    members = [_member(1, "A", membership_date=date(2020, 6, 11))]   # 5 years tomorrow
    assert celebration_stats(members, TODAY)["membership_milestones"] == 1

    members = [_member(1, "A", membership_date=date(2021, 6, 10))]   # 4 years today
    assert celebration_stats(members, TODAY)["membership_milestones"] == 0


def test_future_membership_date_is_not_a_milestone():
    members = [
        _member(1, "A", membership_date=date(2025, 6, 20)),
        _member(2, "B", membership_date=date(2026, 6, 20)),
    ]
    assert celebration_stats(members, TODAY)["membership_milestones"] == 0

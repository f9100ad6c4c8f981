# backend/ministry/services/celebrations.py
"""Birthdays, wedding anniversaries and membership anniversaries.

Every function takes ``today`` explicitly; nothing here reads the clock.
Only month/day of a recurring date matter for scheduling; its year is used
for the "turning N" count.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)

UPCOMING_WINDOW_DAYS = 30
THIS_WEEK_DAYS = 7
MILESTONE_EVERY_YEARS = 5

KIND_FIELDS: Dict[str, str] = {
    "birthday": "date_of_birth",
    "anniversary": "wedding_anniversary",
    "membership": "membership_date",
}

GREETINGS: Dict[str, str] = {
    "birthday": (
        "Happy Birthday, {name}! Wishing you a blessed year ahead filled with "
        "God's grace and favor."
    ),
    "anniversary": (
        "Happy Anniversary, {name}! Celebrating the beautiful journey of love and "
        "commitment. May God continue to bless your union."
    ),
    "membership": (
        "Happy Membership Anniversary, {name}! Thank you for being part of our "
        "church family. We thank God for you."
    ),
}


def _in_year(recurring: date, year: int) -> date:
    try:
        return recurring.replace(year=year)
    except ValueError:
        # 29 February in a non-leap year rolls over to 1 March
        return date(year, 3, 1)


def next_occurrence(recurring: date, today: date) -> date:
    """Next date (today included) that falls on ``recurring``'s month/day."""
    upcoming = _in_year(recurring, today.year)
    if upcoming < today:
        upcoming = _in_year(recurring, today.year + 1)
    return upcoming


def days_until(recurring: date, today: date) -> int:
    return (next_occurrence(recurring, today) - today).days


def turning_years(recurring: date, today: date) -> int:
    """Age (or years together) at the next occurrence.

    Completed years, plus one: the cards announce the birthday or
    anniversary the member is about to have. Completed years count by
    calendar month/day, so a 29 February date has not come round on
    28 February.
    """
    years = today.year - recurring.year
    if (today.month, today.day) < (recurring.month, recurring.day):
        years -= 1
    return years + 1


def is_upcoming(days: int) -> bool:
    return 0 <= days <= UPCOMING_WINDOW_DAYS


def is_this_week(days: int) -> bool:
    return days <= THIS_WEEK_DAYS


def countdown_label(days: int) -> str:
    if days == 0:
        return "Today!"
    if days == 1:
        return "Tomorrow"
    return f"{days} days"


def greeting(kind: str, first_name: str) -> str:
    """Default message an admin edits before sending."""
    return GREETINGS[kind].format(name=first_name)


def upcoming_celebrations(
    members: Iterable[Any],
    today: date,
    kind: str = "birthday",
) -> List[Dict[str, Any]]:
    """Members whose ``kind`` date recurs within the next 30 days, soonest first.

    Members without the date are left out.
    """
    field = KIND_FIELDS[kind]
    rows: List[Dict[str, Any]] = []

    for member in members:
        recurring: Optional[date] = getattr(member, field, None)
        if recurring is None:
            continue

        upcoming = next_occurrence(recurring, today)
        days = (upcoming - today).days
        if not is_upcoming(days):
            continue

        rows.append(
            {
                "member_id": member.id,
                "first_name": member.first_name,
                "last_name": member.last_name,
                "email": member.email,
                "phone": getattr(member, "phone", None),
                "kind": kind,
                "date": recurring,
                "next_date": upcoming,
                "days_until": days,
                "turning": turning_years(recurring, today),
                "this_week": is_this_week(days),
                "label": countdown_label(days),
                "message": greeting(kind, member.first_name),
            }
        )

    rows.sort(key=lambda r: (r["next_date"], r["last_name"], r["first_name"]))
    logger.debug("%s: %s upcoming as of %s", kind, len(rows), today)
    return rows


def _is_milestone(recurring: date, occurrence: date) -> bool:
    years = occurrence.year - recurring.year
    return years > 0 and years % MILESTONE_EVERY_YEARS == 0


def celebration_stats(members: Iterable[Any], today: date) -> Dict[str, int]:
    """Counters for the member-care board.

    A membership milestone is an upcoming membership anniversary whose year
    count on the day itself is a positive multiple of 5.
    """
    members = list(members)
    birthdays = upcoming_celebrations(members, today, "birthday")
    anniversaries = upcoming_celebrations(members, today, "anniversary")
    memberships = upcoming_celebrations(members, today, "membership")

    return {
        "birthdays_this_week": sum(1 for r in birthdays if r["this_week"]),
        "birthdays_upcoming": len(birthdays),
        "anniversaries_this_week": sum(1 for r in anniversaries if r["this_week"]),
        "anniversaries_upcoming": len(anniversaries),
        "membership_milestones": sum(
            1 for r in memberships if _is_milestone(r["date"], r["next_date"])
        ),
    }

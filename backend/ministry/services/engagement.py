# backend/ministry/services/engagement.py
"""Member engagement scoring.

The score is a weighted, capped sum of a member's spiritual-activity
counters plus a bonus for each filled-in profile field:

    devotionals * 5   (max 30)
    journals    * 10  (max 30)
    prayers     * 5   (max 20)
    primary gift set  +10
    current season set +10

The per-term caps already bound the total at 100; the final clamp is kept
so the range holds even if the weights change.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from ministry.models.members import Member, MemberSpiritualProfile

logger = logging.getLogger(__name__)

MAX_SCORE = 100

DEVOTIONAL_WEIGHT, DEVOTIONAL_CAP = 5, 30
JOURNAL_WEIGHT, JOURNAL_CAP = 10, 30
PRAYER_WEIGHT, PRAYER_CAP = 5, 20
PRIMARY_GIFT_BONUS = 10
CURRENT_SEASON_BONUS = 10

HIGH_THRESHOLD = 70
MEDIUM_THRESHOLD = 40

# Members at or above this score count as "active" on the member-care board
ACTIVE_THRESHOLD = MEDIUM_THRESHOLD

BANDS = ("High", "Medium", "Low")


def _count(value: Optional[int]) -> int:
    return max(int(value or 0), 0)


def calculate_engagement_score(
    devotionals: Optional[int] = 0,
    journal_entries: Optional[int] = 0,
    prayers: Optional[int] = 0,
    has_primary_gift: bool = False,
    has_current_season: bool = False,
) -> int:
    """Return the engagement score in [0, 100]. Missing counts are zero."""
    score = 0
    score += min(_count(devotionals) * DEVOTIONAL_WEIGHT, DEVOTIONAL_CAP)
    score += min(_count(journal_entries) * JOURNAL_WEIGHT, JOURNAL_CAP)
    score += min(_count(prayers) * PRAYER_WEIGHT, PRAYER_CAP)
    if has_primary_gift:
        score += PRIMARY_GIFT_BONUS
    if has_current_season:
        score += CURRENT_SEASON_BONUS
    return min(score, MAX_SCORE)


def score_profile(profile: Optional[MemberSpiritualProfile]) -> int:
    """Score a spiritual profile row; a member without one scores 0."""
    if profile is None:
        return 0
    return calculate_engagement_score(
        devotionals=profile.total_devotionals_read,
        journal_entries=profile.total_journal_entries,
        prayers=profile.total_prayers_submitted,
        has_primary_gift=bool(profile.primary_gift),
        has_current_season=bool(profile.current_season),
    )


def engagement_band(score: int) -> str:
    if score >= HIGH_THRESHOLD:
        return "High"
    if score >= MEDIUM_THRESHOLD:
        return "Medium"
    return "Low"


def _member_row(member: Member) -> Dict[str, Any]:
    profile = member.spiritual_profile
    score = score_profile(profile)
    return {
        "id": member.id,
        "first_name": member.first_name,
        "last_name": member.last_name,
        "email": member.email,
        "tier": member.tier,
        "created_at": member.created_at,
        "primary_gift": profile.primary_gift if profile else None,
        "current_season": profile.current_season if profile else None,
        "total_devotionals_read": _count(profile.total_devotionals_read) if profile else 0,
        "total_journal_entries": _count(profile.total_journal_entries) if profile else 0,
        "total_prayers_submitted": _count(profile.total_prayers_submitted) if profile else 0,
        "engagement_score": score,
        "band": engagement_band(score),
    }


def engagement_summary(members: Iterable[Member]) -> Dict[str, Any]:
    """Score every member and roll up the member-care board counters.

    Rows come back newest member first (ties broken by id, highest first).
    """
    ordered = sorted(
        members,
        key=lambda m: (m.created_at is not None, m.created_at, m.id),
        reverse=True,
    )
    rows: List[Dict[str, Any]] = [_member_row(m) for m in ordered]

    by_band = {band: 0 for band in BANDS}
    for row in rows:
        by_band[row["band"]] += 1

    active = sum(1 for row in rows if row["engagement_score"] >= ACTIVE_THRESHOLD)
    logger.debug("engagement summary: %s members, %s active", len(rows), active)

    return {
        "total_members": len(rows),
        "active_members": active,
        "by_band": by_band,
        "members": rows,
    }

from datetime import datetime
from types import SimpleNamespace

import pytest

from ministry.services.engagement import (
    calculate_engagement_score,
    engagement_band,
    engagement_summary,
    score_profile,
)


def _profile(**kw):
    base = dict(
        primary_gift=None,
        current_season=None,
        total_devotionals_read=0,
        total_journal_entries=0,
        total_prayers_submitted=0,
    )
    base.update(kw)
    return SimpleNamespace(**base)


def _member(id, created_at, profile=None, first_name="Ann"):
    return SimpleNamespace(
        id=id,
        first_name=first_name,
        last_name="Member",
        email=f"m{id}@example.org",
        tier="free",
        created_at=created_at,
        spiritual_profile=profile,
    )


def test_empty_activity_scores_zero():
    assert calculate_engagement_score(0, 0, 0, False, False) == 0


def test_every_term_at_cap_scores_100():
    assert calculate_engagement_score(6, 3, 4, True, True) == 100


@pytest.mark.parametrize(
    "args, expected",
    [
        ((1, 0, 0, False, False), 5),
        ((0, 1, 0, False, False), 10),
        ((0, 0, 1, False, False), 5),
        ((0, 0, 0, True, False), 10),
        ((0, 0, 0, False, True), 10),
    ],
)
def test_single_unit_weights(args, expected):
    assert calculate_engagement_score(*args) == expected


def test_terms_are_capped_individually():
    # 100 devotionals still only earn 30
    assert calculate_engagement_score(100, 0, 0) == 30
    assert calculate_engagement_score(0, 100, 0) == 30
    assert calculate_engagement_score(0, 0, 100) == 20


def test_score_stays_in_range_for_large_counts():
    for d in (0, 3, 50, 10_000):
        for j in (0, 2, 50):
            for p in (0, 1, 99):
                for g in (False, True):
                    for s in (False, True):
                        assert 0 <= calculate_engagement_score(d, j, p, g, s) <= 100


def test_missing_counts_are_zero():
    assert calculate_engagement_score(None, None, None) == 0
    assert calculate_engagement_score(None, 2, None) == 20


def test_score_profile_uses_text_fields_as_flags():
    assert score_profile(None) == 0
    assert score_profile(_profile(primary_gift="Teaching")) == 10
    assert score_profile(_profile(primary_gift="", current_season="Growth")) == 10
    assert score_profile(
        _profile(total_devotionals_read=2, total_journal_entries=1, total_prayers_submitted=None)
    ) == 20


@pytest.mark.parametrize(
    "score, band",
    [(100, "High"), (70, "High"), (69, "Medium"), (40, "Medium"), (39, "Low"), (0, "Low")],
)
def test_bands(score, band):
    assert engagement_band(score) == band


def test_idempotent():
    first = calculate_engagement_score(2, 1, 3, True, False)
    assert calculate_engagement_score(2, 1, 3, True, False) == first


def test_summary_counts_and_order():
    members = [
        _member(1, datetime(2024, 1, 1), _profile(total_devotionals_read=4, total_journal_entries=3, primary_gift="Mercy",
                                                   current_season="Harvest", total_prayers_submitted=4)),
        _member(2, datetime(2025, 5, 1), _profile(total_devotionals_read=8, current_season="Rest")),
        _member(3, datetime(2025, 6, 1)),
    ]
    summary = engagement_summary(members)

    assert summary["total_members"] == 3
    # 90 (High) and 40 (Medium) are active, 0 is not
    assert summary["active_members"] == 2
    assert summary["by_band"] == {"High": 1, "Medium": 1, "Low": 1}
    assert [m["id"] for m in summary["members"]] == [3, 2, 1]
    assert summary["members"][2]["engagement_score"] == 90
    assert summary["members"][0]["total_devotionals_read"] == 0

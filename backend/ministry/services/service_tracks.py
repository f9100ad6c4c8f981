# backend/ministry/services/service_tracks.py
"""Mission-trip service tracks and occupation-based suggestions.

All matching is case-insensitive substring matching against ordered keyword
rules; the first rule that matches wins, so rule order decides ties
(e.g. "School Nurse" is a medical occupation, not an education one).
"""
from __future__ import annotations

from datetime import date
from typing import Dict, List, Optional, Sequence, Tuple

from dateutil.relativedelta import relativedelta

MEDICAL_MISSIONS = "medical_missions"
EDUCATION_YOUTH = "education_youth"
MINISTRY_SPIRITUAL = "ministry_spiritual"
BUSINESS_DEVELOPMENT = "business_development"
FOOD_SECURITY = "food_security"
MATERIAL_SUPPORT = "material_support"

# Selectable tracks, in the order the application form lists them
SERVICE_TRACKS: List[Dict[str, str]] = [
    {
        "value": MINISTRY_SPIRITUAL,
        "label": "Ministry & Spiritual Care",
        "description": "Lead worship, prayer, and pastoral care",
    },
    {
        "value": EDUCATION_YOUTH,
        "label": "Education & Youth",
        "description": "Work with schools and youth programs",
    },
    {
        "value": MEDICAL_MISSIONS,
        "label": "Medical Missions",
        "description": "Healthcare professionals providing care",
    },
    {
        "value": BUSINESS_DEVELOPMENT,
        "label": "Business Development",
        "description": "Entrepreneurship training and microfinance",
    },
    {
        "value": FOOD_SECURITY,
        "label": "Food Security",
        "description": "Agricultural projects and nutrition programs",
    },
    {
        "value": MATERIAL_SUPPORT,
        "label": "Material Support",
        "description": "Distribution of supplies and resources",
    },
]

TRACK_VALUES = frozenset(t["value"] for t in SERVICE_TRACKS)

Rule = Tuple[Tuple[str, ...], str]

TRACK_RULES: Sequence[Rule] = (
    (("doctor", "nurse", "medical", "health", "physician", "therapist"), MEDICAL_MISSIONS),
    (("teacher", "professor", "education", "tutor", "school"), EDUCATION_YOUTH),
    (("pastor", "minister", "missionary", "chaplain", "worship"), MINISTRY_SPIRITUAL),
    (("business", "entrepreneur", "finance", "accountant", "consultant"), BUSINESS_DEVELOPMENT),
    (("agriculture", "farm", "food", "nutrition"), FOOD_SECURITY),
)

MEDICAL_KEYWORDS = ("doctor", "nurse", "medical", "health")
EDUCATION_KEYWORDS = ("teacher", "education", "professor")
MINISTRY_KEYWORDS = ("pastor", "minister", "missionary")
BUSINESS_KEYWORDS = ("business", "entrepreneur", "finance")

MESSAGE_RULES: Sequence[Rule] = (
    (
        MEDICAL_KEYWORDS,
        "{name}, your medical expertise could transform lives in Kenya. Our Medical "
        "Missions track is looking for healthcare professionals just like you to "
        "provide care in underserved communities.",
    ),
    (
        EDUCATION_KEYWORDS,
        "{name}, your passion for education could impact hundreds of young Kenyans. "
        "The Education & Youth track needs dedicated educators to inspire the next "
        "generation.",
    ),
    (
        MINISTRY_KEYWORDS,
        "{name}, your ministry experience makes you an ideal candidate for our "
        "Ministry & Spiritual Care track. Help lead worship and provide pastoral care "
        "across three cities.",
    ),
    (
        BUSINESS_KEYWORDS,
        "{name}, your business acumen could help Kenyan entrepreneurs build "
        "sustainable businesses. Join our Business Development track to create "
        "lasting economic impact.",
    ),
)

DEFAULT_MESSAGE = (
    "{name}, this trip is more than travel. It's a Kingdom assignment. Your unique "
    "gifts and experiences can transform lives in Kenya while transforming yours."
)

YOUNG_ADULT_AGES = (18, 30)
NEW_MEMBER_MONTHS = 24


def _first_match(text: Optional[str], rules: Sequence[Rule]) -> Optional[str]:
    if not text:
        return None
    lowered = text.lower()
    for keywords, result in rules:
        if any(k in lowered for k in keywords):
            return result
    return None


def _mentions(text: Optional[str], keywords: Sequence[str]) -> bool:
    lowered = (text or "").lower()
    return any(k in lowered for k in keywords)


def recommend_track(occupation: Optional[str]) -> str:
    """Suggest a service track for an occupation; "" when nothing matches."""
    return _first_match(occupation, TRACK_RULES) or ""


def track_label(value: Optional[str]) -> Optional[str]:
    for track in SERVICE_TRACKS:
        if track["value"] == value:
            return track["label"]
    return None


def personalized_message(first_name: str, occupation: Optional[str]) -> str:
    """The "why you should go" invitation shown on the trip page."""
    template = _first_match(occupation, MESSAGE_RULES) or DEFAULT_MESSAGE
    return template.format(name=first_name)


def scholarship_eligibility(
    date_of_birth: Optional[date],
    occupation: Optional[str],
    member_since: Optional[date],
    today: date,
) -> Tuple[bool, List[str]]:
    """Return (eligible, reasons) for the trip scholarship nudge.

    Priority groups: young adults, medical and education professionals, and
    newer members who are likely first-time missionaries.
    """
    reasons: List[str] = []

    if date_of_birth is not None:
        age = relativedelta(today, date_of_birth).years
        low, high = YOUNG_ADULT_AGES
        if low <= age <= high:
            reasons.append("Young adult with calling")

    if _mentions(occupation, MEDICAL_KEYWORDS):
        reasons.append("Medical professional")
    if _mentions(occupation, EDUCATION_KEYWORDS):
        reasons.append("Education professional")

    if member_since is not None:
        # months are counted as 30-day blocks
        months = (today - member_since).days / 30
        if months < NEW_MEMBER_MONTHS:
            reasons.append("Potential first-time missionary")

    return bool(reasons), reasons

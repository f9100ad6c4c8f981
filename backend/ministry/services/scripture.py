# backend/ministry/services/scripture.py
"""Scripture of the day: the stored verse for a date, else a fixed rotation."""
from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List

from sqlalchemy import select
from sqlalchemy.orm import Session

from ministry.models.scripture import DailyScripture
from ministry.schemas.scripture import ScriptureCreate

logger = logging.getLogger(__name__)

DEFAULT_REFLECTION = "How does this scripture speak to your life today?"

DEFAULT_SCRIPTURES: List[Dict[str, str]] = [
    {
        "reference": "Philippians 4:13",
        "text": "I can do all things through Christ who strengthens me.",
        "theme": "Strength",
    },
    {
        "reference": "Jeremiah 29:11",
        "text": (
            "For I know the plans I have for you, declares the Lord, plans to prosper "
            "you and not to harm you, plans to give you hope and a future."
        ),
        "theme": "Hope",
    },
    {
        "reference": "Psalm 23:1",
        "text": "The Lord is my shepherd; I shall not want.",
        "theme": "Provision",
    },
    {
        "reference": "Romans 8:28",
        "text": (
            "And we know that in all things God works for the good of those who love "
            "him, who have been called according to his purpose."
        ),
        "theme": "Purpose",
    },
    {
        "reference": "Isaiah 40:31",
        "text": (
            "But those who hope in the Lord will renew their strength. They will soar "
            "on wings like eagles; they will run and not grow weary, they will walk "
            "and not be faint."
        ),
        "theme": "Renewal",
    },
    {
        "reference": "Proverbs 3:5-6",
        "text": (
            "Trust in the Lord with all your heart and lean not on your own "
            "understanding; in all your ways submit to him, and he will make your "
            "paths straight."
        ),
        "theme": "Trust",
    },
    {
        "reference": "Matthew 11:28",
        "text": "Come to me, all you who are weary and burdened, and I will give you rest.",
        "theme": "Rest",
    },
]


def day_of_year(today: date) -> int:
    """1 January is day 1."""
    return today.timetuple().tm_yday


def default_scripture(today: date) -> Dict[str, Any]:
    verse = DEFAULT_SCRIPTURES[day_of_year(today) % len(DEFAULT_SCRIPTURES)]
    return {
        "date": today,
        **verse,
        "reflection": DEFAULT_REFLECTION,
        "is_default": True,
    }


def scripture_for(db: Session, today: date) -> Dict[str, Any]:
    row = db.execute(
        select(DailyScripture).where(DailyScripture.date == today)
    ).scalars().first()
    if row is None:
        logger.debug("no stored scripture for %s, using rotation", today)
        return default_scripture(today)

    return {
        "date": row.date,
        "reference": row.reference,
        "text": row.text,
        "theme": row.theme,
        "reflection": row.reflection or DEFAULT_REFLECTION,
        "is_default": False,
    }


def create_scripture(db: Session, data: ScriptureCreate) -> DailyScripture:
    row = DailyScripture(**data.model_dump())
    db.add(row)
    db.commit()
    db.refresh(row)
    return row

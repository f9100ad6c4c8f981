"""
Shared FastAPI dependency helpers.

`get_db` provides a SQLAlchemy session per request and closes it afterward.
`get_today` resolves the reference date for calendar arithmetic: an explicit
``?today=YYYY-MM-DD`` wins, otherwise the current date in the ``TZ`` zone.
Services always receive the date as a parameter.
"""

import os
from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo

from fastapi import Query

from ministry.db import get_db  # noqa: F401

DEFAULT_TZ = "America/New_York"


def local_today() -> date:
    return datetime.now(ZoneInfo(os.getenv("TZ", DEFAULT_TZ))).date()


def get_today(
    today: Optional[date] = Query(None, description="Reference date (defaults to today)"),
) -> date:
    return today or local_today()

from __future__ import annotations

from datetime import date as _date
from typing import Literal, Optional

from pydantic import BaseModel

CelebrationKind = Literal["birthday", "anniversary", "membership"]


class CelebrationRead(BaseModel):
    member_id: int
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    kind: CelebrationKind
    date: _date
    next_date: _date
    days_until: int
    turning: int            # age / years together at next_date
    this_week: bool
    label: str              # "Today!", "Tomorrow", "N days"
    message: str            # default greeting


class CelebrationStatsRead(BaseModel):
    birthdays_this_week: int
    birthdays_upcoming: int
    anniversaries_this_week: int
    anniversaries_upcoming: int
    membership_milestones: int

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from ministry.models.members import MemberTier

Band = Literal["High", "Medium", "Low"]


class MemberEngagementRead(BaseModel):
    id: int
    first_name: str
    last_name: str
    email: str
    tier: MemberTier
    created_at: Optional[datetime] = None
    primary_gift: Optional[str] = None
    current_season: Optional[str] = None
    total_devotionals_read: int = 0
    total_journal_entries: int = 0
    total_prayers_submitted: int = 0
    engagement_score: int = Field(..., ge=0, le=100)
    band: Band


class EngagementSummaryRead(BaseModel):
    total_members: int
    active_members: int         # score >= 40
    by_band: Dict[str, int]
    members: List[MemberEngagementRead]

# backend/ministry/api/member_care.py
"""Member-care board: engagement insights and upcoming celebrations."""
from __future__ import annotations

from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from ministry.dependencies import get_db, get_today
from ministry.schemas.celebrations import (
    CelebrationKind,
    CelebrationRead,
    CelebrationStatsRead,
)
from ministry.schemas.engagement import EngagementSummaryRead, MemberEngagementRead
from ministry.services import celebrations, engagement
from ministry.services.members import get_all_members, get_member

router = APIRouter(prefix="/member-care", tags=["Member Care"])


@router.get("/engagement", response_model=EngagementSummaryRead)
def engagement_board(db: Session = Depends(get_db)) -> EngagementSummaryRead:
    return engagement.engagement_summary(get_all_members(db))


@router.get("/members/{member_id}/engagement", response_model=MemberEngagementRead)
def member_engagement(member_id: int, db: Session = Depends(get_db)) -> MemberEngagementRead:
    member = get_member(db, member_id)
    if not member:
        raise HTTPException(status_code=404, detail="Member not found")
    return engagement.engagement_summary([member])["members"][0]


@router.get("/celebrations", response_model=List[CelebrationRead])
def upcoming(
    kind: CelebrationKind = Query("birthday"),
    today: date = Depends(get_today),
    db: Session = Depends(get_db),
) -> List[CelebrationRead]:
    return celebrations.upcoming_celebrations(get_all_members(db), today, kind)


@router.get("/celebrations/stats", response_model=CelebrationStatsRead)
def stats(
    today: date = Depends(get_today),
    db: Session = Depends(get_db),
) -> CelebrationStatsRead:
    return celebrations.celebration_stats(get_all_members(db), today)

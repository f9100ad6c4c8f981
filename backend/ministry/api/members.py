# backend/ministry/api/members.py
from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ministry.dependencies import get_db
from ministry.models.members import MemberTier
from ministry.schemas.members import (
    MemberCreate,
    MemberRead,
    MemberUpdate,
    SpiritualProfileRead,
    SpiritualProfileUpsert,
)
from ministry.services import members as svc

router = APIRouter(prefix="/members", tags=["Members"])
logger = logging.getLogger(__name__)


@router.post("/", response_model=MemberRead, status_code=status.HTTP_201_CREATED)
def create_member(payload: MemberCreate, db: Session = Depends(get_db)) -> MemberRead:
    try:
        member = svc.create_member(db, payload)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="Member with this email already exists")
    logger.info("create_member id=%s tier=%s", member.id, member.tier.value)
    return member


@router.get("/", response_model=List[MemberRead])
def list_members(
    db: Session = Depends(get_db),
    q: Optional[str] = Query(None, description="Search by name/email"),
    tier: Optional[MemberTier] = None,
    limit: int = Query(100, le=500),
    skip: int = 0,
) -> List[MemberRead]:
    return svc.list_members(db, q=q, tier=tier, skip=skip, limit=limit)


@router.get("/{member_id}", response_model=MemberRead)
def get_member(member_id: int, db: Session = Depends(get_db)) -> MemberRead:
    member = svc.get_member(db, member_id)
    if not member:
        raise HTTPException(status_code=404, detail="Member not found")
    return member


@router.patch("/{member_id}", response_model=MemberRead)
def update_member(
    member_id: int, payload: MemberUpdate, db: Session = Depends(get_db)
) -> MemberRead:
    logger.info(
        "update_member id=%s fields=%s",
        member_id,
        sorted(payload.model_dump(exclude_unset=True)),
    )
    try:
        member = svc.update_member(db, member_id, payload)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="Member with this email already exists")
    if not member:
        raise HTTPException(status_code=404, detail="Member not found")
    return member


@router.put("/{member_id}/spiritual-profile", response_model=SpiritualProfileRead)
def put_spiritual_profile(
    member_id: int, payload: SpiritualProfileUpsert, db: Session = Depends(get_db)
) -> SpiritualProfileRead:
    profile = svc.upsert_spiritual_profile(db, member_id, payload)
    if not profile:
        raise HTTPException(status_code=404, detail="Member not found")
    return profile

# backend/ministry/services/members.py
from __future__ import annotations

from typing import List, Optional

from sqlalchemy import and_, or_, select
from sqlalchemy.orm import Session

from ministry.models.members import Member, MemberSpiritualProfile, MemberTier
from ministry.schemas.members import MemberCreate, MemberUpdate, SpiritualProfileUpsert


def create_member(db: Session, data: MemberCreate) -> Member:
    member = Member(**data.model_dump())
    db.add(member)
    db.commit()
    db.refresh(member)
    return member


def get_member(db: Session, member_id: int) -> Optional[Member]:
    return db.get(Member, member_id)


def list_members(
    db: Session,
    q: Optional[str] = None,
    tier: Optional[MemberTier] = None,
    skip: int = 0,
    limit: int = 100,
) -> List[Member]:
    conds = []
    if q:
        like = f"%{q}%"
        conds.append(
            or_(
                Member.first_name.ilike(like),
                Member.last_name.ilike(like),
                Member.email.ilike(like),
            )
        )
    if tier is not None:
        conds.append(Member.tier == tier)

    stmt = (
        select(Member)
        .where(and_(*conds) if conds else True)
        .order_by(Member.last_name.asc(), Member.first_name.asc(), Member.id.asc())
        .offset(skip)
        .limit(limit)
    )
    return list(db.execute(stmt).scalars().all())


def get_all_members(db: Session) -> List[Member]:
    return list(db.execute(select(Member)).scalars().all())


def update_member(db: Session, member_id: int, data: MemberUpdate) -> Optional[Member]:
    member = db.get(Member, member_id)
    if not member:
        return None

    for k, v in data.model_dump(exclude_unset=True).items():
        setattr(member, k, v)

    db.add(member)
    db.commit()
    db.refresh(member)
    return member


def upsert_spiritual_profile(
    db: Session, member_id: int, data: SpiritualProfileUpsert
) -> Optional[MemberSpiritualProfile]:
    member = db.get(Member, member_id)
    if not member:
        return None

    profile = member.spiritual_profile
    if profile is None:
        profile = MemberSpiritualProfile(member_id=member.id)
        member.spiritual_profile = profile

    for k, v in data.model_dump().items():
        setattr(profile, k, v)

    db.add(profile)
    db.commit()
    db.refresh(profile)
    return profile

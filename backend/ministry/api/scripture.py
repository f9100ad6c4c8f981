from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ministry.dependencies import get_db, get_today
from ministry.schemas.scripture import ScriptureCreate, ScriptureRead
from ministry.services import scripture as svc

router = APIRouter(prefix="/scripture", tags=["Scripture"])


@router.get("/today", response_model=ScriptureRead)
def scripture_today(
    today: date = Depends(get_today),
    db: Session = Depends(get_db),
) -> ScriptureRead:
    return svc.scripture_for(db, today)


@router.post("/", response_model=ScriptureRead, status_code=status.HTTP_201_CREATED)
def create_scripture(payload: ScriptureCreate, db: Session = Depends(get_db)) -> ScriptureRead:
    try:
        row = svc.create_scripture(db, payload)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="Scripture already set for this date")
    return svc.scripture_for(db, row.date)

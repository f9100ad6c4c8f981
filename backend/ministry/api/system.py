# ministry/api/system.py
from __future__ import annotations

import logging
import os
from datetime import datetime
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ministry import __version__
from ministry.db import engine
from ministry.dependencies import DEFAULT_TZ, get_db

router = APIRouter(tags=["ops"])
logger = logging.getLogger(__name__)


@router.get("/health")
def health(db: Session = Depends(get_db)):
    """Liveness check: local time plus a SELECT 1 over the request session."""
    tz = os.getenv("TZ", DEFAULT_TZ)
    bind = db.get_bind()
    probe = {"status": "ok", "dialect": bind.dialect.name}

    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.warning("health: database probe failed: %s", e)
        probe["status"] = f"error: {type(e).__name__}"

    return {
        "status": "ok",
        "time": {"tz": tz, "now": datetime.now(ZoneInfo(tz)).isoformat()},
        "db": probe,
    }


@router.get("/version")
def version():
    return {
        "app": "Ministry Backend",
        "version": __version__,
        "db_driver": engine.url.get_driver_name(),
        "tz": os.getenv("TZ", DEFAULT_TZ),
    }

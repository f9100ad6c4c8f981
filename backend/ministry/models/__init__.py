# backend/ministry/models/__init__.py
"""
Central model registry.

Import this once at startup (e.g., in main.py) so SQLAlchemy sees all mapped
classes before relationships are resolved.
"""
from ministry.db import Base  # re-export Base

from .members import Member, MemberSpiritualProfile, MemberTier  # noqa: F401
from .mission_trip import (  # noqa: F401
    ApplicationStatus,
    MissionTrip,
    TripDailyFocus,
    TripParticipant,
)
from .scripture import DailyScripture  # noqa: F401

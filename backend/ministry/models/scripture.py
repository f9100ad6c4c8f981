from __future__ import annotations

from datetime import date as _date
from typing import Optional

from sqlalchemy import Date, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ministry.db import Base


class DailyScripture(Base):
    __tablename__ = "daily_scriptures"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    date: Mapped[_date] = mapped_column(Date, nullable=False, unique=True, index=True)
    reference: Mapped[str] = mapped_column(String(100), nullable=False)
    text: Mapped[str] = mapped_column(Text(), nullable=False)
    theme: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    reflection: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)

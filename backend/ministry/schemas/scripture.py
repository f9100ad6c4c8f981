from __future__ import annotations

from datetime import date as _date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ScriptureCreate(BaseModel):
    date: _date
    reference: str = Field(..., max_length=100)
    text: str
    theme: Optional[str] = Field(None, max_length=100)
    reflection: Optional[str] = None


class ScriptureRead(ScriptureCreate):
    is_default: bool = False

    model_config = ConfigDict(from_attributes=True)

from __future__ import annotations
from pydantic import BaseModel, Field
from .common import MajorType


class ItemSummary(BaseModel):
    offset: int = Field(..., ge=0)
    length: int = Field(..., ge=1)
    major_type: MajorType
    text: str | None = None

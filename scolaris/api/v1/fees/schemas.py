"""Fees schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from scolaris.core.enums import Month


class FeeCreate(BaseModel):
    student_id: str
    month: Month
    amount: float = Field(..., gt=0)


class FeeResponse(BaseModel):
    id: str
    owner_id: Optional[str] = None
    student_id: str
    month: Month
    amount: float
    paid_at: datetime
    created_at: datetime

    class Config:
        from_attributes = True

import datetime
from typing import Optional

from pydantic import BaseModel, Field


class AbsenceCreate(BaseModel):
    student_id: str
    date: Optional[datetime.date] = Field(None, description="Defaults to today")
    hours: float = Field(..., gt=0)
    reason: Optional[str] = Field(None, max_length=255)


class AbsenceResponse(BaseModel):
    id: str
    owner_id: Optional[str] = None
    student_id: str
    date: datetime.date
    hours: float
    reason: Optional[str] = None
    created_at: datetime.datetime

    class Config:
        from_attributes = True


class AbsenceTotalResponse(BaseModel):
    student_id: str
    total_hours: float

import datetime
from typing import Optional

from pydantic import Field

from scolaris.core.models.record import Record


class Absence(Record):
    student_id: str
    date: datetime.date = Field(default_factory=datetime.date.today)
    hours: float = Field(..., gt=0, description="Duration in hours")
    reason: Optional[str] = None

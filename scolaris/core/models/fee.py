from datetime import datetime

from pydantic import Field

from scolaris.core.enums import Month
from scolaris.core.models.record import Record, utcnow


class Fee(Record):
    student_id: str
    month: Month
    amount: float
    paid_at: datetime = Field(default_factory=utcnow)

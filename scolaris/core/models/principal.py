"""Principal accounts. A principal's id is the tenant id of everything its school owns."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from scolaris.core.models.record import new_record_id, utcnow


class Principal(BaseModel):
    id: str = Field(default_factory=new_record_id)
    created_at: datetime = Field(default_factory=utcnow)
    first_name: str
    last_name: str
    college_name: Optional[str] = None
    username: Optional[str] = None

    class Config:
        extra = "allow"

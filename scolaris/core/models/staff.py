from typing import List, Optional

from pydantic import BaseModel, field_validator

from scolaris.core.enums import StaffRole
from scolaris.core.models.record import Record


class ClassAssignment(BaseModel):
    """A (level, division) pair a teacher is assigned to."""

    level: str
    division: str = ""

    class Config:
        extra = "allow"

    @field_validator("division", mode="before")
    @classmethod
    def _division_as_text(cls, value):
        if value is None:
            return ""
        return str(value).strip()


class StaffMember(Record):
    """Teacher or supervisor account. owner_id links it to its principal and is never reassigned."""

    role: StaffRole
    first_name: str
    last_name: str
    username: Optional[str] = None
    phone: Optional[str] = None
    sex: Optional[str] = None
    subject_id: Optional[str] = None
    assigned_classes: List[ClassAssignment] = []

from typing import Optional

from pydantic import Field, field_validator

from scolaris.core.models.record import Record


class Student(Record):
    name: str
    institutional_id: Optional[str] = None
    level: str = Field(..., description="Grade/year label, e.g. 6ème")
    classroom: str = Field("", description="Division inside the level; empty when the level has one class")
    guardian_phone: Optional[str] = None
    address: Optional[str] = None

    @field_validator("classroom", mode="before")
    @classmethod
    def _classroom_as_text(cls, value):
        if value is None:
            return ""
        return str(value).strip()

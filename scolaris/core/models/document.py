"""The whole dataset: one versioned value read and replaced as a unit."""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, model_validator

from scolaris.core.models.absence import Absence
from scolaris.core.models.fee import Fee
from scolaris.core.models.grade_entry import GradeEntry
from scolaris.core.models.principal import Principal
from scolaris.core.models.staff import StaffMember
from scolaris.core.models.student import Student
from scolaris.core.models.subject import Subject
from scolaris.db.seed_subjects import seed_subjects

# Collections whose records carry an owner reference.
OWNED_COLLECTIONS = ("students", "staff", "subjects", "grades", "absences", "fees")


class Document(BaseModel):
    version: int = 0
    updated_at: Optional[datetime] = None

    principals: List[Principal] = []
    students: List[Student] = []
    staff: List[StaffMember] = []
    subjects: List[Subject] = []
    grades: List[GradeEntry] = []
    absences: List[Absence] = []
    fees: List[Fee] = []

    class Config:
        extra = "allow"

    @model_validator(mode="before")
    @classmethod
    def _initialize_collections(cls, data: Any) -> Any:
        if data is None:
            data = {}
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for name in ("principals",) + OWNED_COLLECTIONS:
            if data.get(name) is None:
                data[name] = []
        if not data["subjects"]:
            data["subjects"] = seed_subjects()
        return data

    def collection(self, name: str) -> list:
        if name not in OWNED_COLLECTIONS and name != "principals":
            raise KeyError(name)
        return getattr(self, name)

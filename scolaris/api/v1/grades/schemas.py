from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from scolaris.core.enums import Term
from scolaris.core.models.grade_entry import MAX_SCORES, Score, parse_score, parse_scores


class GradeInput(BaseModel):
    """One student's row in a grade sheet. Empty cells may be sent as ""."""

    student_id: str
    scores: List[Optional[Score]] = Field(default_factory=list, max_length=MAX_SCORES)
    average: Optional[Score] = Field(None, description="Computed from scores when omitted")
    remark: Optional[str] = Field(None, max_length=500)
    competency: Optional[str] = Field(None, max_length=500)

    @field_validator("scores", mode="before")
    @classmethod
    def _parse_scores(cls, value):
        return parse_scores(value)

    @field_validator("average", mode="before")
    @classmethod
    def _parse_average(cls, value):
        return parse_score(value)


class GradeSheetSave(BaseModel):
    """A whole grade sheet: one subject, one term, many students."""

    subject_id: str
    term: Term
    entries: List[GradeInput]


class GradeSaveResult(BaseModel):
    saved: int
    cleared: int


class GradeEntryResponse(BaseModel):
    id: str
    owner_id: Optional[str] = None
    student_id: str
    subject_id: str
    term: Term
    scores: List[Optional[float]]
    average: Optional[float] = None
    remark: str = ""
    competency: str = ""
    created_at: datetime

    class Config:
        from_attributes = True


class AverageResponse(BaseModel):
    student_id: str
    subject_id: str
    term: Term
    average: Optional[float] = None

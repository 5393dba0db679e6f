"""Grade entries: one per (student, subject, term)."""

from typing import Annotated, List, Optional

from pydantic import Field, field_validator

from scolaris.core.enums import Term
from scolaris.core.models.record import Record

MAX_SCORES = 5
SCORE_MIN = 0
SCORE_MAX = 20

Score = Annotated[float, Field(ge=SCORE_MIN, le=SCORE_MAX)]


def parse_score(value) -> Optional[float]:
    """
    Turn a raw score cell into a float, or None when the cell is empty.
    Anything that is neither text nor a number is handed back untouched for
    the field validation to refuse.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError("a score must be a number, not a boolean")
    if isinstance(value, str):
        value = value.strip().replace(",", ".")
        if not value:
            return None
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    return value


def parse_scores(values):
    """Parse each cell of a score row. Only a list or tuple is a row."""
    if values is None:
        return []
    if not isinstance(values, (list, tuple)):
        return values
    return [parse_score(v) for v in values]


class GradeEntry(Record):
    student_id: str
    subject_id: str
    term: Term
    scores: List[Optional[Score]] = Field(default_factory=list, max_length=MAX_SCORES)
    average: Optional[Score] = None
    remark: str = ""
    competency: str = ""

    @field_validator("scores", mode="before")
    @classmethod
    def _parse_scores(cls, value):
        return parse_scores(value)

    @field_validator("average", mode="before")
    @classmethod
    def _parse_average(cls, value):
        return parse_score(value)

    @field_validator("remark", "competency", mode="before")
    @classmethod
    def _text_or_blank(cls, value):
        return "" if value is None else value

    @property
    def present_scores(self) -> List[float]:
        return [s for s in self.scores if s is not None]

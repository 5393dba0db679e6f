from typing import Dict, List, Optional

from pydantic import BaseModel

from scolaris.api.v1.students.schemas import StudentResponse
from scolaris.core.enums import Term


class ReportRow(BaseModel):
    """One subject line of a report card."""

    subject_id: str
    subject_name: str
    scores: List[Optional[float]] = []
    scores_display: str
    average: Optional[float] = None
    class_average: Optional[float] = None
    rank: Optional[int] = None
    ranked_count: int = 0
    rank_display: str
    remark: str = ""
    competency: str = ""


class ReportSummary(BaseModel):
    general_average: Optional[float] = None
    class_general_average: Optional[float] = None
    general_rank: Optional[int] = None
    ranked_count: int = 0
    general_rank_display: str


class ReportCard(BaseModel):
    student: StudentResponse
    term: Term
    rows: List[ReportRow]
    summary: ReportSummary


class SubjectColumn(BaseModel):
    id: str
    name: str


class ClassSummaryRow(BaseModel):
    student_id: str
    student_name: str
    averages: Dict[str, Optional[float]]
    general_average: Optional[float] = None
    general_rank: Optional[int] = None


class ClassSummary(BaseModel):
    """Grade matrix of a class: students x subjects, with class averages as footer."""

    level: str
    classroom: Optional[str] = None
    term: Term
    subjects: List[SubjectColumn]
    rows: List[ClassSummaryRow]
    subject_class_averages: Dict[str, Optional[float]]
    class_general_average: Optional[float] = None

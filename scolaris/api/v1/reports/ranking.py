"""
Class benchmarks and tie-aware ranks.

A class is every student of the tenant with the same level (and division, when
one is given). For one term the engine collects, per subject, the present
averages of the class members, their mean and a descending list used for rank
lookup; then the same for per-student general averages.

Ranks are found by value, not by position: a student's rank is one plus the
index of the first value in the descending list equal to their own within
RANK_TOLERANCE. Equal averages therefore share a rank and the next score ranks
after the whole tie group (15, 15, 12 ranks as 1, 1, 3).
"""

from typing import Dict, Iterable, List, Optional

from pydantic import BaseModel

from scolaris.api.v1.grades.aggregator import average_index
from scolaris.core.config import settings
from scolaris.core.enums import Term
from scolaris.core.models import GradeEntry, Student, Subject

# Two averages closer than this are the same score for ranking.
RANK_TOLERANCE = 1e-3

NO_DATA = "—"


class SubjectBenchmark(BaseModel):
    subject_id: str
    scores: List[float] = []
    class_average: Optional[float] = None

    @property
    def ranked_count(self) -> int:
        return len(self.scores)


class ClassBenchmarks(BaseModel):
    term: Term
    member_ids: List[str] = []
    subjects: Dict[str, SubjectBenchmark] = {}
    # student_id -> subject_id -> average, present averages only
    averages: Dict[str, Dict[str, float]] = {}
    general_averages: Dict[str, float] = {}
    general_scores: List[float] = []
    class_general_average: Optional[float] = None

    def subject_average(self, student_id: str, subject_id: str) -> Optional[float]:
        return self.averages.get(student_id, {}).get(subject_id)

    def subject_rank(self, student_id: str, subject_id: str) -> Optional[int]:
        benchmark = self.subjects.get(subject_id)
        if benchmark is None:
            return None
        return rank_of(self.subject_average(student_id, subject_id), benchmark.scores)

    def general_rank(self, student_id: str) -> Optional[int]:
        return rank_of(self.general_averages.get(student_id), self.general_scores)


def mean(values: Iterable[float]) -> Optional[float]:
    values = list(values)
    if not values:
        return None
    return sum(values) / len(values)


def rank_of(value: Optional[float], scores_desc: List[float], tolerance: float = RANK_TOLERANCE) -> Optional[int]:
    """1-based rank of `value` in a descending list, or None when unranked."""
    if value is None:
        return None
    for index, score in enumerate(scores_desc):
        if abs(score - value) < tolerance:
            return index + 1
    return None


def format_rank(rank: Optional[int], total: Optional[int] = None) -> str:
    """
    Display form of a rank: first place takes its own ordinal marker, every
    other rank the common one. Optional "/total" of ranked students.
    """
    if rank is None:
        return NO_DATA
    suffix = settings.rank_suffix_first if rank == 1 else settings.rank_suffix_other
    text = f"{rank}{suffix}"
    if total is not None:
        text += f"/{total}"
    return text


def class_members(students: Iterable[Student], level: str, classroom: Optional[str] = None) -> List[Student]:
    """Students of a level, narrowed to one division when `classroom` is given ("" included)."""
    members = [s for s in students if s.level == level]
    if classroom is not None:
        division = str(classroom).strip()
        members = [s for s in members if s.classroom == division]
    return members


def compute_benchmarks(
    members: List[Student],
    subjects: List[Subject],
    entries: Iterable[GradeEntry],
    term: Term,
) -> ClassBenchmarks:
    """
    Benchmarks for one class and term. Only the given subjects count; a
    missing average is skipped, never read as zero.
    """
    index = average_index(entries, term)
    benchmarks = ClassBenchmarks(term=term, member_ids=[s.id for s in members])

    for subject in subjects:
        scores = [index[(s.id, subject.id)] for s in members if (s.id, subject.id) in index]
        benchmarks.subjects[subject.id] = SubjectBenchmark(
            subject_id=subject.id,
            scores=sorted(scores, reverse=True),
            class_average=mean(scores),
        )

    for student in members:
        present = {
            subject.id: index[(student.id, subject.id)]
            for subject in subjects
            if (student.id, subject.id) in index
        }
        benchmarks.averages[student.id] = present
        general = mean(present.values())
        if general is not None:
            benchmarks.general_averages[student.id] = general

    general_values = list(benchmarks.general_averages.values())
    benchmarks.general_scores = sorted(general_values, reverse=True)
    benchmarks.class_general_average = mean(general_values)
    return benchmarks

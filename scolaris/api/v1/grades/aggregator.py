"""
Per-student, per-subject averages.

The average stored on a GradeEntry is authoritative: the aggregator looks it up
and never recomputes it. compute_average is the pure function callers use to
derive an average from raw scores. "No data" is None throughout.
"""

from typing import Dict, Iterable, Optional, Tuple

from scolaris.core.enums import Term
from scolaris.core.models import GradeEntry
from scolaris.core.models.grade_entry import parse_score


def compute_average(scores: Iterable) -> Optional[float]:
    """Mean of the present scores; None when no score is present."""
    present = [s for s in (parse_score(v) for v in scores) if s is not None]
    if not present:
        return None
    return sum(present) / len(present)


def is_blank_entry(scores: Iterable, average: Optional[float], remark: Optional[str], competency: Optional[str] = None) -> bool:
    """An entry with nothing worth storing: it is pruned instead of persisted."""
    if any(parse_score(v) is not None for v in scores):
        return False
    if average is not None:
        return False
    return not (remark or "").strip() and not (competency or "").strip()


def same_triple(entry: GradeEntry, student_id: str, subject_id: str, term: Term) -> bool:
    return entry.student_id == student_id and entry.subject_id == subject_id and entry.term == term


def find_entry(entries: Iterable[GradeEntry], student_id: str, subject_id: str, term: Term) -> Optional[GradeEntry]:
    return next((e for e in entries if same_triple(e, student_id, subject_id, term)), None)


def lookup_average(entries: Iterable[GradeEntry], student_id: str, subject_id: str, term: Term) -> Optional[float]:
    entry = find_entry(entries, student_id, subject_id, term)
    return entry.average if entry else None


def average_index(entries: Iterable[GradeEntry], term: Term) -> Dict[Tuple[str, str], float]:
    """(student_id, subject_id) -> present average for one term."""
    index: Dict[Tuple[str, str], float] = {}
    for entry in entries:
        if entry.term == term and entry.average is not None:
            index.setdefault((entry.student_id, entry.subject_id), entry.average)
    return index

"""
Report assembly. Class benchmarks are recomputed on every call since grades can
change between two reports.
"""

import logging
from typing import Optional

from scolaris.api.v1.grades.aggregator import find_entry
from scolaris.api.v1.students import service as student_service
from scolaris.api.v1.students.schemas import StudentResponse
from scolaris.api.v1.subjects.service import scoped_subjects
from scolaris.core.enums import Term
from scolaris.core.tenant_service import tenant_scope
from scolaris.db.store import DocumentStore

from .ranking import NO_DATA, class_members, compute_benchmarks, format_rank
from .schemas import (
    ClassSummary,
    ClassSummaryRow,
    ReportCard,
    ReportRow,
    ReportSummary,
    SubjectColumn,
)

logger = logging.getLogger(__name__)


def _round(value: Optional[float]) -> Optional[float]:
    return round(value, 2) if value is not None else None


def _format_score(score: float) -> str:
    return f"{score:g}"


def build_report_card(
    store: DocumentStore,
    tenant_id: Optional[str],
    student_id: str,
    term: Term,
) -> Optional[ReportCard]:
    """Report card of one student for one term, or None if the student is not visible."""
    document = store.load()
    student = student_service.find_student(document, tenant_id, student_id)
    if not student:
        return None

    students = student_service.scoped_students(document, tenant_id)
    subjects = scoped_subjects(document, tenant_id)
    grades = tenant_scope(tenant_id, document.grades)

    members = class_members(students, student.level, student.classroom)
    benchmarks = compute_benchmarks(members, subjects, grades, term)

    rows = []
    for subject in subjects:
        entry = find_entry(grades, student.id, subject.id, term)
        benchmark = benchmarks.subjects[subject.id]
        average = entry.average if entry else None
        rank = benchmarks.subject_rank(student.id, subject.id)
        rows.append(
            ReportRow(
                subject_id=subject.id,
                subject_name=subject.name,
                scores=entry.scores if entry else [],
                scores_display=", ".join(_format_score(s) for s in entry.present_scores) if entry else NO_DATA,
                average=_round(average),
                class_average=_round(benchmark.class_average),
                rank=rank,
                ranked_count=benchmark.ranked_count,
                rank_display=format_rank(rank, benchmark.ranked_count),
                remark=entry.remark if entry else "",
                competency=(entry.competency or NO_DATA) if entry else NO_DATA,
            )
        )

    general_rank = benchmarks.general_rank(student.id)
    summary = ReportSummary(
        general_average=_round(benchmarks.general_averages.get(student.id)),
        class_general_average=_round(benchmarks.class_general_average),
        general_rank=general_rank,
        ranked_count=len(benchmarks.general_scores),
        general_rank_display=format_rank(general_rank),
    )
    logger.debug("Report card built for student %s / %s (%d class members)", student.id, term.value, len(members))
    return ReportCard(
        student=StudentResponse.model_validate(student, from_attributes=True),
        term=term,
        rows=rows,
        summary=summary,
    )


def build_class_summary(
    store: DocumentStore,
    tenant_id: Optional[str],
    level: str,
    classroom: Optional[str],
    term: Term,
) -> ClassSummary:
    """Averages of every class member in every subject; classroom None covers the whole level."""
    document = store.load()
    subjects = scoped_subjects(document, tenant_id)
    members = class_members(student_service.scoped_students(document, tenant_id), level, classroom)
    benchmarks = compute_benchmarks(members, subjects, tenant_scope(tenant_id, document.grades), term)

    rows = [
        ClassSummaryRow(
            student_id=s.id,
            student_name=s.name,
            averages={subj.id: _round(benchmarks.subject_average(s.id, subj.id)) for subj in subjects},
            general_average=_round(benchmarks.general_averages.get(s.id)),
            general_rank=benchmarks.general_rank(s.id),
        )
        for s in members
    ]
    return ClassSummary(
        level=level,
        classroom=classroom,
        term=term,
        subjects=[SubjectColumn(id=subj.id, name=subj.name) for subj in subjects],
        rows=rows,
        subject_class_averages={
            subj.id: _round(benchmarks.subjects[subj.id].class_average) for subj in subjects
        },
        class_general_average=_round(benchmarks.class_general_average),
    )

import logging
from typing import List, Optional

from scolaris.api.v1.students import service as student_service
from scolaris.api.v1.subjects import service as subject_service
from scolaris.core.enums import Term
from scolaris.core.models import GradeEntry
from scolaris.core.tenant_service import require_tenant, tenant_scope
from scolaris.db.store import DocumentStore

from .aggregator import compute_average, is_blank_entry, lookup_average, same_triple
from .schemas import GradeEntryResponse, GradeSaveResult, GradeSheetSave

logger = logging.getLogger(__name__)


def _to_response(g: GradeEntry) -> GradeEntryResponse:
    return GradeEntryResponse.model_validate(g, from_attributes=True)


def list_grades(
    store: DocumentStore,
    tenant_id: Optional[str],
    subject_id: Optional[str] = None,
    term: Optional[Term] = None,
    student_id: Optional[str] = None,
) -> List[GradeEntryResponse]:
    grades = tenant_scope(tenant_id, store.load().grades)
    if subject_id is not None:
        grades = [g for g in grades if g.subject_id == subject_id]
    if term is not None:
        grades = [g for g in grades if g.term == term]
    if student_id is not None:
        grades = [g for g in grades if g.student_id == student_id]
    return [_to_response(g) for g in grades]


def get_average(
    store: DocumentStore,
    tenant_id: Optional[str],
    student_id: str,
    subject_id: str,
    term: Term,
) -> Optional[float]:
    return lookup_average(tenant_scope(tenant_id, store.load().grades), student_id, subject_id, term)


def save_grades(store: DocumentStore, tenant_id: Optional[str], payload: GradeSheetSave) -> GradeSaveResult:
    """
    Save a grade sheet. Each row replaces whatever was stored for its
    (student, subject, term), with no merge. A blank row is not stored, so
    saving one clears the triple. The subject and every student must belong
    to the tenant; nothing is written otherwise.
    """
    tenant_id = require_tenant(tenant_id)
    document = store.load()
    subject_service.get_subject_for_tenant(document, tenant_id, payload.subject_id)
    for row in payload.entries:
        student_service.get_student_for_tenant(document, tenant_id, row.student_id)

    saved = cleared = 0
    for row in payload.entries:
        before = len(document.grades)
        document.grades = [
            g for g in document.grades if not same_triple(g, row.student_id, payload.subject_id, payload.term)
        ]
        replaced = before - len(document.grades)

        average = row.average if row.average is not None else compute_average(row.scores)
        if is_blank_entry(row.scores, average, row.remark, row.competency):
            if replaced:
                cleared += 1
            continue

        document.grades.append(
            GradeEntry(
                owner_id=tenant_id,
                student_id=row.student_id,
                subject_id=payload.subject_id,
                term=payload.term,
                scores=row.scores,
                average=average,
                remark=(row.remark or "").strip(),
                competency=(row.competency or "").strip(),
            )
        )
        saved += 1

    store.replace(document)
    logger.info(
        "Grades saved for subject %s / %s: %d saved, %d cleared (tenant %s)",
        payload.subject_id,
        payload.term.value,
        saved,
        cleared,
        tenant_id,
    )
    return GradeSaveResult(saved=saved, cleared=cleared)


def delete_grade(store: DocumentStore, tenant_id: Optional[str], grade_id: str) -> bool:
    document = store.load()
    if not any(g.id == grade_id for g in tenant_scope(tenant_id, document.grades)):
        return False
    document.grades = [g for g in document.grades if g.id != grade_id]
    store.replace(document)
    return True

import logging
from typing import List, Optional

from scolaris.api.v1.students import service as student_service
from scolaris.core.models import Absence
from scolaris.core.tenant_service import require_tenant, tenant_scope
from scolaris.db.store import DocumentStore

from .schemas import AbsenceCreate, AbsenceResponse

logger = logging.getLogger(__name__)


def _to_response(a: Absence) -> AbsenceResponse:
    return AbsenceResponse.model_validate(a, from_attributes=True)


def list_absences(
    store: DocumentStore,
    tenant_id: Optional[str],
    student_id: Optional[str] = None,
) -> List[AbsenceResponse]:
    """Absences of the tenant, optionally for one student id (even a deleted one)."""
    absences = tenant_scope(tenant_id, store.load().absences)
    if student_id is not None:
        absences = [a for a in absences if a.student_id == student_id]
    absences.sort(key=lambda a: a.date, reverse=True)
    return [_to_response(a) for a in absences]


def total_absence_hours(store: DocumentStore, tenant_id: Optional[str], student_id: str) -> float:
    return sum(a.hours for a in tenant_scope(tenant_id, store.load().absences) if a.student_id == student_id)


def add_absence(store: DocumentStore, tenant_id: Optional[str], payload: AbsenceCreate) -> AbsenceResponse:
    tenant_id = require_tenant(tenant_id)
    document = store.load()
    student_service.get_student_for_tenant(document, tenant_id, payload.student_id)
    fields = {"date": payload.date} if payload.date else {}
    obj = Absence(
        owner_id=tenant_id,
        student_id=payload.student_id,
        hours=payload.hours,
        reason=payload.reason,
        **fields,
    )
    document.absences.append(obj)
    store.replace(document)
    logger.info("Absence %s (%sh) recorded for student %s", obj.id, obj.hours, obj.student_id)
    return _to_response(obj)


def delete_absence(store: DocumentStore, tenant_id: Optional[str], absence_id: str) -> bool:
    document = store.load()
    if not any(a.id == absence_id for a in tenant_scope(tenant_id, document.absences)):
        return False
    document.absences = [a for a in document.absences if a.id != absence_id]
    store.replace(document)
    return True

import logging
from typing import List, Optional, Set

from fastapi import status

from scolaris.api.v1.students import service as student_service
from scolaris.api.v1.students.schemas import StudentResponse
from scolaris.api.v1.subjects import service as subject_service
from scolaris.auth.usernames import SUPERVISOR_PREFIX, TEACHER_PREFIX, generate_username
from scolaris.core.enums import StaffRole
from scolaris.core.exceptions import ServiceError
from scolaris.core.models import ClassAssignment, Document, StaffMember
from scolaris.core.tenant_service import require_tenant, tenant_scope
from scolaris.db.store import DocumentStore

from .schemas import ClassAssignmentItem, StaffCreate, StaffResponse

logger = logging.getLogger(__name__)

ROLE_PREFIX = {
    StaffRole.TEACHER: TEACHER_PREFIX,
    StaffRole.SUPERVISOR: SUPERVISOR_PREFIX,
}


def _to_response(m: StaffMember) -> StaffResponse:
    return StaffResponse(
        id=m.id,
        owner_id=m.owner_id,
        role=m.role,
        first_name=m.first_name,
        last_name=m.last_name,
        username=m.username,
        phone=m.phone,
        sex=m.sex,
        subject_id=m.subject_id,
        assigned_classes=[ClassAssignmentItem(level=c.level, division=c.division) for c in m.assigned_classes],
        created_at=m.created_at,
    )


def _taken_usernames(document: Document) -> Set[str]:
    names = {m.username for m in document.staff if m.username}
    names.update(p.username for p in document.principals if p.username)
    return names


def unique_username(document: Document, last_name: str, first_name: str, prefix: str, max_attempts: int = 20) -> str:
    """Generate a login handle not yet used by any account in the document."""
    taken = _taken_usernames(document)
    for _ in range(max_attempts):
        candidate = generate_username(last_name, first_name, prefix)
        if candidate not in taken:
            return candidate
    raise ServiceError("Could not generate a unique username", status.HTTP_409_CONFLICT)


def list_staff(store: DocumentStore, tenant_id: Optional[str], role: Optional[StaffRole] = None) -> List[StaffResponse]:
    members = tenant_scope(tenant_id, store.load().staff)
    if role is not None:
        members = [m for m in members if m.role == role]
    return [_to_response(m) for m in members]


def add_staff(store: DocumentStore, tenant_id: Optional[str], payload: StaffCreate) -> StaffResponse:
    tenant_id = require_tenant(tenant_id)
    document = store.load()
    if payload.role == StaffRole.SUPERVISOR and (payload.subject_id or payload.assigned_classes):
        raise ServiceError("Supervisors have no subject or class assignments", status.HTTP_400_BAD_REQUEST)
    if payload.subject_id:
        subject_service.get_subject_for_tenant(document, tenant_id, payload.subject_id)

    first_name = payload.first_name.strip()
    last_name = payload.last_name.strip()
    obj = StaffMember(
        owner_id=tenant_id,
        role=payload.role,
        first_name=first_name,
        last_name=last_name,
        username=unique_username(document, last_name, first_name, ROLE_PREFIX[payload.role]),
        phone=payload.phone,
        sex=payload.sex,
        subject_id=payload.subject_id,
        assigned_classes=[
            ClassAssignment(level=c.level.strip(), division=c.division)
            for c in payload.assigned_classes
            if c.level.strip()
        ],
    )
    document.staff.append(obj)
    store.replace(document)
    logger.info("%s %s created for tenant %s", payload.role.value.capitalize(), obj.id, tenant_id)
    return _to_response(obj)


def delete_staff(store: DocumentStore, tenant_id: Optional[str], staff_id: str) -> bool:
    document = store.load()
    if not any(m.id == staff_id for m in tenant_scope(tenant_id, document.staff)):
        return False
    document.staff = [m for m in document.staff if m.id != staff_id]
    store.replace(document)
    logger.info("Staff member %s deleted for tenant %s", staff_id, tenant_id)
    return True


def students_for_teacher(store: DocumentStore, tenant_id: Optional[str], staff_id: str) -> Optional[List[StudentResponse]]:
    """
    Students a teacher may see: the tenant's students in one of the teacher's
    assigned classes. No assigned classes means no students. None if the teacher
    is not found for this tenant.
    """
    document = store.load()
    member = next(
        (m for m in tenant_scope(tenant_id, document.staff) if m.id == staff_id and m.role == StaffRole.TEACHER),
        None,
    )
    if not member:
        return None
    students = [
        s
        for s in student_service.scoped_students(document, tenant_id)
        if any(student_service.in_class(s, c.level, c.division) for c in member.assigned_classes)
    ]
    return [StudentResponse.model_validate(s, from_attributes=True) for s in students]

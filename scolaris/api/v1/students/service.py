import logging
from typing import List, Optional

from fastapi import status

from scolaris.core.exceptions import ServiceError
from scolaris.core.models import Document, Student
from scolaris.core.tenant_service import require_tenant, tenant_scope
from scolaris.db.store import DocumentStore

from .schemas import StudentCreate, StudentResponse

logger = logging.getLogger(__name__)


def _to_response(s: Student) -> StudentResponse:
    return StudentResponse(
        id=s.id,
        owner_id=s.owner_id,
        name=s.name,
        institutional_id=s.institutional_id,
        level=s.level,
        classroom=s.classroom,
        guardian_phone=s.guardian_phone,
        address=s.address,
        created_at=s.created_at,
    )


def in_class(student: Student, level: str, classroom: Optional[str] = None) -> bool:
    """Same level and, when a classroom is given, the same division."""
    if student.level != level:
        return False
    return classroom is None or student.classroom == str(classroom).strip()


def scoped_students(document: Document, tenant_id: Optional[str]) -> List[Student]:
    return tenant_scope(tenant_id, document.students)


def find_student(document: Document, tenant_id: Optional[str], student_id: str) -> Optional[Student]:
    return next((s for s in scoped_students(document, tenant_id) if s.id == student_id), None)


def get_student_for_tenant(document: Document, tenant_id: Optional[str], student_id: str) -> Student:
    """Like find_student, but a missing student is a caller error."""
    student = find_student(document, tenant_id, student_id)
    if not student:
        raise ServiceError(f"Student not found: {student_id}", status.HTTP_404_NOT_FOUND)
    return student


def list_students(
    store: DocumentStore,
    tenant_id: Optional[str],
    level: Optional[str] = None,
    classroom: Optional[str] = None,
) -> List[StudentResponse]:
    students = scoped_students(store.load(), tenant_id)
    if level is not None:
        students = [s for s in students if in_class(s, level, classroom)]
    return [_to_response(s) for s in students]


def get_student(store: DocumentStore, tenant_id: Optional[str], student_id: str) -> Optional[StudentResponse]:
    obj = find_student(store.load(), tenant_id, student_id)
    return _to_response(obj) if obj else None


def add_student(store: DocumentStore, tenant_id: Optional[str], payload: StudentCreate) -> StudentResponse:
    tenant_id = require_tenant(tenant_id)
    document = store.load()
    obj = Student(
        owner_id=tenant_id,
        name=payload.name.strip(),
        institutional_id=payload.institutional_id.strip() if payload.institutional_id else None,
        level=payload.level.strip(),
        classroom=payload.classroom,
        guardian_phone=payload.guardian_phone,
        address=payload.address,
    )
    document.students.append(obj)
    store.replace(document)
    logger.info("Student %s created for tenant %s", obj.id, tenant_id)
    return _to_response(obj)


def delete_student(store: DocumentStore, tenant_id: Optional[str], student_id: str) -> bool:
    """
    Remove the student record only. Grades, absences and fees that reference it
    are left in place (orphaned, still readable by student id).
    """
    document = store.load()
    if not find_student(document, tenant_id, student_id):
        return False
    document.students = [s for s in document.students if s.id != student_id]
    store.replace(document)
    logger.info("Student %s deleted for tenant %s", student_id, tenant_id)
    return True

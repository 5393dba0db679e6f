from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from scolaris.api.v1.students.schemas import StudentResponse
from scolaris.auth.dependencies import get_tenant_id, require_principal
from scolaris.core.enums import StaffRole
from scolaris.core.exceptions import ServiceError
from scolaris.db.store import DocumentStore, get_store

from .schemas import StaffCreate, StaffResponse
from . import service

router = APIRouter(prefix="/api/v1/staff", tags=["staff"])


@router.post(
    "",
    response_model=StaffResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_principal)],
)
def create_staff(
    payload: StaffCreate,
    store: DocumentStore = Depends(get_store),
    tenant_id: Optional[str] = Depends(get_tenant_id),
):
    """Create a teacher or supervisor account linked to the principal's school."""
    try:
        return service.add_staff(store, tenant_id, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("", response_model=List[StaffResponse])
def list_staff(
    role: Optional[StaffRole] = Query(None),
    store: DocumentStore = Depends(get_store),
    tenant_id: Optional[str] = Depends(get_tenant_id),
):
    return service.list_staff(store, tenant_id, role=role)


@router.get("/{staff_id}/students", response_model=List[StudentResponse])
def teacher_students(
    staff_id: str,
    store: DocumentStore = Depends(get_store),
    tenant_id: Optional[str] = Depends(get_tenant_id),
):
    students = service.students_for_teacher(store, tenant_id, staff_id)
    if students is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Teacher not found")
    return students


@router.delete(
    "/{staff_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_principal)],
)
def delete_staff(
    staff_id: str,
    store: DocumentStore = Depends(get_store),
    tenant_id: Optional[str] = Depends(get_tenant_id),
):
    if not service.delete_staff(store, tenant_id, staff_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Staff member not found")

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from scolaris.auth.dependencies import get_tenant_id
from scolaris.core.exceptions import ServiceError
from scolaris.db.store import DocumentStore, get_store

from .schemas import AbsenceCreate, AbsenceResponse, AbsenceTotalResponse
from . import service

router = APIRouter(prefix="/api/v1/absences", tags=["absences"])


@router.post("", response_model=AbsenceResponse, status_code=status.HTTP_201_CREATED)
def create_absence(
    payload: AbsenceCreate,
    store: DocumentStore = Depends(get_store),
    tenant_id: Optional[str] = Depends(get_tenant_id),
):
    try:
        return service.add_absence(store, tenant_id, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("", response_model=List[AbsenceResponse])
def list_absences(
    student_id: Optional[str] = Query(None),
    store: DocumentStore = Depends(get_store),
    tenant_id: Optional[str] = Depends(get_tenant_id),
):
    return service.list_absences(store, tenant_id, student_id=student_id)


@router.get("/students/{student_id}/total", response_model=AbsenceTotalResponse)
def absence_total(
    student_id: str,
    store: DocumentStore = Depends(get_store),
    tenant_id: Optional[str] = Depends(get_tenant_id),
):
    return AbsenceTotalResponse(
        student_id=student_id,
        total_hours=service.total_absence_hours(store, tenant_id, student_id),
    )


@router.delete("/{absence_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_absence(
    absence_id: str,
    store: DocumentStore = Depends(get_store),
    tenant_id: Optional[str] = Depends(get_tenant_id),
):
    if not service.delete_absence(store, tenant_id, absence_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Absence not found")

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from scolaris.auth.dependencies import get_tenant_id
from scolaris.core.enums import Term
from scolaris.core.exceptions import ServiceError
from scolaris.db.store import DocumentStore, get_store

from .schemas import AverageResponse, GradeEntryResponse, GradeSaveResult, GradeSheetSave
from . import service

router = APIRouter(prefix="/api/v1/grades", tags=["grades"])


@router.put("", response_model=GradeSaveResult)
def save_grades(
    payload: GradeSheetSave,
    store: DocumentStore = Depends(get_store),
    tenant_id: Optional[str] = Depends(get_tenant_id),
):
    """Save a grade sheet for one subject and term (last write wins per student)."""
    try:
        return service.save_grades(store, tenant_id, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("", response_model=List[GradeEntryResponse])
def list_grades(
    subject_id: Optional[str] = Query(None),
    term: Optional[Term] = Query(None),
    student_id: Optional[str] = Query(None),
    store: DocumentStore = Depends(get_store),
    tenant_id: Optional[str] = Depends(get_tenant_id),
):
    return service.list_grades(store, tenant_id, subject_id=subject_id, term=term, student_id=student_id)


@router.get("/average", response_model=AverageResponse)
def get_average(
    student_id: str = Query(...),
    subject_id: str = Query(...),
    term: Term = Query(...),
    store: DocumentStore = Depends(get_store),
    tenant_id: Optional[str] = Depends(get_tenant_id),
):
    return AverageResponse(
        student_id=student_id,
        subject_id=subject_id,
        term=term,
        average=service.get_average(store, tenant_id, student_id, subject_id, term),
    )


@router.delete("/{grade_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_grade(
    grade_id: str,
    store: DocumentStore = Depends(get_store),
    tenant_id: Optional[str] = Depends(get_tenant_id),
):
    if not service.delete_grade(store, tenant_id, grade_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Grade entry not found")

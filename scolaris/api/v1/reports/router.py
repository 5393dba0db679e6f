from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from scolaris.auth.dependencies import get_tenant_id
from scolaris.core.enums import Term
from scolaris.db.store import DocumentStore, get_store

from .schemas import ClassSummary, ReportCard
from . import service

router = APIRouter(prefix="/api/v1/reports", tags=["reports"])


@router.get("/students/{student_id}", response_model=ReportCard)
def report_card(
    student_id: str,
    term: Term = Query(Term.TERM_1),
    store: DocumentStore = Depends(get_store),
    tenant_id: Optional[str] = Depends(get_tenant_id),
):
    """Report card of a student for one term, ready for display or printing."""
    report = service.build_report_card(store, tenant_id, student_id, term)
    if not report:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student not found")
    return report


@router.get("/classes", response_model=ClassSummary)
def class_summary(
    level: str = Query(...),
    classroom: Optional[str] = Query(None),
    term: Term = Query(Term.TERM_1),
    store: DocumentStore = Depends(get_store),
    tenant_id: Optional[str] = Depends(get_tenant_id),
):
    return service.build_class_summary(store, tenant_id, level, classroom, term)

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from scolaris.auth.dependencies import get_tenant_id
from scolaris.core.exceptions import ServiceError
from scolaris.db.store import DocumentStore, get_store

from .schemas import FeeCreate, FeeResponse
from . import service

router = APIRouter(prefix="/api/v1/fees", tags=["fees"])


@router.post("", response_model=FeeResponse, status_code=status.HTTP_201_CREATED)
def create_fee(
    payload: FeeCreate,
    store: DocumentStore = Depends(get_store),
    tenant_id: Optional[str] = Depends(get_tenant_id),
):
    try:
        return service.add_fee(store, tenant_id, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("", response_model=List[FeeResponse])
def list_fees(
    student_id: Optional[str] = Query(None),
    store: DocumentStore = Depends(get_store),
    tenant_id: Optional[str] = Depends(get_tenant_id),
):
    return service.list_fees(store, tenant_id, student_id=student_id)


@router.delete("/{fee_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_fee(
    fee_id: str,
    store: DocumentStore = Depends(get_store),
    tenant_id: Optional[str] = Depends(get_tenant_id),
):
    if not service.delete_fee(store, tenant_id, fee_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Fee not found")

from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, status

from scolaris.auth.dependencies import require_super_admin
from scolaris.core.exceptions import ServiceError
from scolaris.db.store import DocumentStore, get_store

from .schemas import PrincipalCreate, PrincipalResponse
from . import service

router = APIRouter(
    prefix="/api/v1/principals",
    tags=["principals"],
    dependencies=[Depends(require_super_admin)],
)


@router.post("", response_model=PrincipalResponse, status_code=status.HTTP_201_CREATED)
def create_principal(payload: PrincipalCreate, store: DocumentStore = Depends(get_store)):
    try:
        return service.add_principal(store, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("", response_model=List[PrincipalResponse])
def list_principals(store: DocumentStore = Depends(get_store)):
    return service.list_principals(store)


@router.get("/{principal_id}/records", response_model=Dict[str, int])
def principal_records(principal_id: str, store: DocumentStore = Depends(get_store)):
    return service.school_record_counts(store, principal_id)


@router.delete("/{principal_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_principal(principal_id: str, store: DocumentStore = Depends(get_store)):
    if not service.delete_principal(store, principal_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Principal not found")

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from scolaris.auth.dependencies import get_tenant_id, require_principal
from scolaris.core.exceptions import ServiceError
from scolaris.core.tenant_service import claim_unowned, count_unowned
from scolaris.db.store import DocumentStore, get_store

from .schemas import ClaimResponse, LegacyStatusResponse

router = APIRouter(prefix="/api/v1/ownership", tags=["ownership"])


@router.get("/legacy", response_model=LegacyStatusResponse, dependencies=[Depends(require_principal)])
def legacy_status(store: DocumentStore = Depends(get_store)):
    """Whether the document still holds records no school has claimed."""
    count = count_unowned(store.load())
    return LegacyStatusResponse(has_unowned=count > 0, unowned_count=count)


@router.post("/claim", response_model=ClaimResponse, dependencies=[Depends(require_principal)])
def claim_legacy(
    store: DocumentStore = Depends(get_store),
    tenant_id: Optional[str] = Depends(get_tenant_id),
):
    """Assign every unowned record to the calling principal's school."""
    try:
        return ClaimResponse(claimed=claim_unowned(store, tenant_id))
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

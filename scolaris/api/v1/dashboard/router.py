from typing import Optional

from fastapi import APIRouter, Depends

from scolaris.auth.dependencies import get_tenant_id
from scolaris.db.store import DocumentStore, get_store

from .schemas import DashboardResponse
from . import service

router = APIRouter(prefix="/api/v1/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse)
def dashboard(
    store: DocumentStore = Depends(get_store),
    tenant_id: Optional[str] = Depends(get_tenant_id),
):
    return service.get_dashboard(store, tenant_id)

import logging
from typing import Dict, List, Optional

from fastapi import status

from scolaris.api.v1.students import service as student_service
from scolaris.core.config import settings
from scolaris.core.enums import MONTH_ORDER
from scolaris.core.exceptions import ServiceError
from scolaris.core.models import Fee
from scolaris.core.tenant_service import require_tenant, tenant_scope
from scolaris.db.store import DocumentStore

from .schemas import FeeCreate, FeeResponse

logger = logging.getLogger(__name__)


def _to_response(f: Fee) -> FeeResponse:
    return FeeResponse.model_validate(f, from_attributes=True)


def list_fees(store: DocumentStore, tenant_id: Optional[str], student_id: Optional[str] = None) -> List[FeeResponse]:
    fees = tenant_scope(tenant_id, store.load().fees)
    if student_id is not None:
        fees = [f for f in fees if f.student_id == student_id]
    return [_to_response(f) for f in fees]


def add_fee(store: DocumentStore, tenant_id: Optional[str], payload: FeeCreate) -> FeeResponse:
    """Record a tuition payment. The amount must be exactly the configured tuition fee."""
    tenant_id = require_tenant(tenant_id)
    if payload.amount != settings.tuition_fee_amount:
        logger.warning("Fee refused for student %s: amount %s", payload.student_id, payload.amount)
        raise ServiceError(
            f"Tuition fee amount must be exactly {settings.tuition_fee_amount}",
            status.HTTP_400_BAD_REQUEST,
        )
    document = store.load()
    student_service.get_student_for_tenant(document, tenant_id, payload.student_id)
    obj = Fee(owner_id=tenant_id, student_id=payload.student_id, month=payload.month, amount=payload.amount)
    document.fees.append(obj)
    store.replace(document)
    logger.info("Fee %s (%s, %s) recorded for student %s", obj.id, obj.month.value, obj.amount, obj.student_id)
    return _to_response(obj)


def delete_fee(store: DocumentStore, tenant_id: Optional[str], fee_id: str) -> bool:
    document = store.load()
    if not any(f.id == fee_id for f in tenant_scope(tenant_id, document.fees)):
        return False
    document.fees = [f for f in document.fees if f.id != fee_id]
    store.replace(document)
    return True


def revenue_by_month(fees: List[Fee]) -> Dict[str, float]:
    """Sum of amounts per month label, in calendar order."""
    totals: Dict[str, float] = {}
    for fee in fees:
        totals[fee.month.value] = totals.get(fee.month.value, 0) + fee.amount
    return {m.value: totals[m.value] for m in MONTH_ORDER if m.value in totals}

from typing import Optional

from scolaris.api.v1.fees.service import revenue_by_month
from scolaris.core.enums import StaffRole
from scolaris.core.tenant_service import tenant_scope
from scolaris.db.store import DocumentStore

from .schemas import DashboardResponse


def get_dashboard(store: DocumentStore, tenant_id: Optional[str]) -> DashboardResponse:
    """Head counts and fee revenue of one school."""
    document = store.load()
    staff = tenant_scope(tenant_id, document.staff)
    fees = tenant_scope(tenant_id, document.fees)
    revenue = revenue_by_month(fees)
    return DashboardResponse(
        students_count=len(tenant_scope(tenant_id, document.students)),
        teachers_count=sum(1 for m in staff if m.role == StaffRole.TEACHER),
        supervisors_count=sum(1 for m in staff if m.role == StaffRole.SUPERVISOR),
        revenue_by_month=revenue,
        total_revenue=sum(revenue.values()),
    )

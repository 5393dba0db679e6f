from typing import Dict

from pydantic import BaseModel


class DashboardResponse(BaseModel):
    students_count: int
    teachers_count: int
    supervisors_count: int
    revenue_by_month: Dict[str, float]
    total_revenue: float

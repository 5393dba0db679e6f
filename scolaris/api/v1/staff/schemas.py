from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from scolaris.core.enums import StaffRole


class ClassAssignmentItem(BaseModel):
    level: str = Field(..., min_length=1, max_length=50)
    division: Optional[str] = Field(None, max_length=50)


class StaffCreate(BaseModel):
    role: StaffRole
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    phone: Optional[str] = Field(None, max_length=50)
    sex: Optional[str] = Field(None, max_length=1, description="H or F")
    subject_id: Optional[str] = Field(None, description="Taught subject (teachers only)")
    assigned_classes: List[ClassAssignmentItem] = []


class StaffResponse(BaseModel):
    id: str
    owner_id: Optional[str] = None
    role: StaffRole
    first_name: str
    last_name: str
    username: Optional[str] = None
    phone: Optional[str] = None
    sex: Optional[str] = None
    subject_id: Optional[str] = None
    assigned_classes: List[ClassAssignmentItem] = []
    created_at: datetime

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class StudentCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    institutional_id: Optional[str] = Field(None, max_length=100)
    level: str = Field(..., min_length=1, max_length=50, description="Grade/year label, e.g. 6ème")
    classroom: Optional[str] = Field(None, max_length=50, description="Division inside the level")
    guardian_phone: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = Field(None, max_length=255)


class StudentResponse(BaseModel):
    id: str
    owner_id: Optional[str] = None
    name: str
    institutional_id: Optional[str] = None
    level: str
    classroom: str = ""
    guardian_phone: Optional[str] = None
    address: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class SubjectCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)


class SubjectResponse(BaseModel):
    id: str
    owner_id: Optional[str] = None
    name: str
    created_at: datetime

    class Config:
        from_attributes = True

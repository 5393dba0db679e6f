from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class PrincipalCreate(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    college_name: Optional[str] = Field(None, max_length=255)


class PrincipalResponse(BaseModel):
    id: str
    first_name: str
    last_name: str
    college_name: Optional[str] = None
    username: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True

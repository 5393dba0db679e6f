"""Fields shared by every tenant-owned record."""

import uuid
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_validator


def new_record_id() -> str:
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Record(BaseModel):
    """
    Base for Student, StaffMember, Subject, GradeEntry, Absence and Fee.

    owner_id is the tenant (principal account) the record belongs to. None is the
    explicit "unowned" state of legacy data: such records are hidden from every
    tenant-scoped read until claimed.
    """

    id: str = Field(default_factory=new_record_id)
    created_at: datetime = Field(default_factory=utcnow)
    owner_id: Optional[str] = None

    class Config:
        extra = "allow"

    @field_validator("owner_id", mode="before")
    @classmethod
    def _blank_owner_is_unowned(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def is_unowned(self) -> bool:
        return self.owner_id is None

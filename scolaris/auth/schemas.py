from typing import Optional

from pydantic import BaseModel

from scolaris.core.enums import ActorRole


class CurrentActor(BaseModel):
    """The account acting on this request and the tenant it acts for."""

    role: ActorRole
    account_id: Optional[str] = None
    tenant_id: Optional[str] = None

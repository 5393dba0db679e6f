from pydantic import BaseModel


class LegacyStatusResponse(BaseModel):
    has_unowned: bool
    unowned_count: int


class ClaimResponse(BaseModel):
    claimed: int

from pydantic import BaseModel, Field
from typing import List
from splitledger.schemas.member import Member
from splitledger.schemas.money import Money

class Settlement(BaseModel):
    id: str | None = None
    from_member: str = Field(alias="from")
    to_member: str = Field(alias="to")
    amount: Money
    date: str | None = None

    class Config:
        frozen = True
        populate_by_name = True
        from_attributes = True

class SettlementValidateRequest(BaseModel):
    settlement: Settlement
    members: List[Member]

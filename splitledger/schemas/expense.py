from pydantic import BaseModel
from typing import Dict, List
from splitledger.schemas.member import Member
from splitledger.schemas.money import Money

class Split(BaseModel):
    member_id: str
    amount: Money

    class Config:
        frozen = True
        from_attributes = True

class Expense(BaseModel):
    id: str | None = None
    description: str = ""
    amount: Money
    paid_by: str
    split_between: List[Split] = []
    date: str | None = None

    class Config:
        frozen = True
        from_attributes = True

class EqualSplitRequest(BaseModel):
    amount: Money
    member_ids: List[str]

class CustomSplitRequest(BaseModel):
    amount: Money
    custom_amounts: Dict[str, Money]
    selected: List[str]
    fill_remaining: bool = False

class ExpenseValidateRequest(BaseModel):
    expense: Expense
    members: List[Member]

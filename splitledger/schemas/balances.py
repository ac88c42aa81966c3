from decimal import Decimal
from pydantic import BaseModel, Field
from typing import List
from splitledger.schemas.expense import Expense
from splitledger.schemas.member import Member
from splitledger.schemas.money import Money
from splitledger.schemas.settlements import Settlement

class MemberBalance(BaseModel):
    member_id: str
    # positive: is owed money, negative: owes money
    balance: Money

    class Config:
        frozen = True
        from_attributes = True

class Balance(BaseModel):
    from_member: str = Field(alias="from")
    to_member: str = Field(alias="to")
    amount: Decimal

    class Config:
        frozen = True
        populate_by_name = True
        from_attributes = True

class MemberSummary(BaseModel):
    member: Member
    balance: Decimal
    owes: List[Balance]
    is_owed: List[Balance]

class GroupLedgerIn(BaseModel):
    members: List[Member] = []
    expenses: List[Expense] = []
    settlements: List[Settlement] = []

class SimplifyIn(BaseModel):
    balances: List[MemberBalance] = []

class TotalIn(BaseModel):
    expenses: List[Expense] = []
    currency: str | None = None

class TotalOut(BaseModel):
    total: Decimal
    formatted: str

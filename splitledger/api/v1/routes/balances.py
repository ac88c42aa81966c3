from fastapi import APIRouter
from typing import List
from splitledger.core.config import settings
from splitledger.core.currency import format_currency
from splitledger.schemas.balances import (
    Balance,
    GroupLedgerIn,
    MemberBalance,
    MemberSummary,
    SimplifyIn,
    TotalIn,
    TotalOut,
)
from splitledger.services.balance_services import (
    calculate_member_balances,
    get_balance_summary,
    get_total_expenses,
    simplify_debts,
)

router = APIRouter()

@router.post("/", response_model=List[MemberBalance])
async def member_balances(data: GroupLedgerIn):
    return calculate_member_balances(data.members, data.expenses, data.settlements)

@router.post("/simplify", response_model=List[Balance])
async def simplified_debts(data: SimplifyIn):
    return simplify_debts(data.balances, strict=settings.STRICT_BALANCES)

@router.post("/summary", response_model=List[MemberSummary])
async def balance_summary(data: GroupLedgerIn):
    return get_balance_summary(
        data.members,
        data.expenses,
        data.settlements,
        strict=settings.STRICT_BALANCES
    )

@router.post("/total", response_model=TotalOut)
async def total_expenses(data: TotalIn):
    total = get_total_expenses(data.expenses)
    return TotalOut(total=total, formatted=format_currency(total, data.currency))

from fastapi import APIRouter
from typing import List
from splitledger.schemas.expense import CustomSplitRequest, EqualSplitRequest, Expense, ExpenseValidateRequest, Split
from splitledger.services.expense_services import (
    build_custom_splits,
    build_equal_splits,
    split_remaining_equally,
    validate_expense,
)

router = APIRouter()

@router.post("/split/equal", response_model=List[Split])
async def equal_split(data: EqualSplitRequest):
    return build_equal_splits(data.amount, data.member_ids)

@router.post("/split/custom", response_model=List[Split])
async def custom_split(data: CustomSplitRequest):
    amounts = data.custom_amounts
    if data.fill_remaining:
        amounts = split_remaining_equally(data.amount, amounts, data.selected)
    return build_custom_splits(data.amount, amounts, data.selected)

@router.post("/validate", response_model=Expense)
async def validate(data: ExpenseValidateRequest):
    return validate_expense(data.expense, data.members)

from decimal import Decimal
from typing import Dict, List, Mapping, Sequence
from fastapi import HTTPException
from splitledger.core.utils import CENTS, ZERO, TOLERANCE, net_total, qround, to_decimal
from splitledger.schemas.expense import Expense, Split
from splitledger.schemas.member import Member


def build_equal_splits(amount, member_ids: Sequence[str]) -> List[Split]:
    """
    Equal shares rounded to cents. Leftover cents from the rounding go
    one at a time to the first members, so the splits always add up to
    the amount (100 / 3 -> 33.34, 33.33, 33.33).
    """
    if not member_ids:
        raise HTTPException(400, "Please select at least one member")

    if len(member_ids) != len(set(member_ids)):
        raise HTTPException(400, "Duplicate users found in splits")

    total = qround(to_decimal(amount))
    share = qround(total / len(member_ids))
    shares = [share] * len(member_ids)

    leftover = total - share * len(member_ids)
    step = CENTS if leftover > 0 else -CENTS
    i = 0
    while leftover != 0:
        shares[i] += step
        leftover -= step
        i += 1

    return [Split(member_id=mid, amount=amt) for mid, amt in zip(member_ids, shares)]


def split_remaining_equally(
    amount,
    custom_amounts: Mapping[str, Decimal],
    selected: Sequence[str],
) -> Dict[str, Decimal]:
    """
    Fill in the unassigned part of a custom split.

    The remainder goes to selected members that have no amount yet; when
    everyone already has an amount it is spread over all selected members.
    Nothing changes when nothing is left to assign.
    """
    total = to_decimal(amount)
    amounts = {mid: to_decimal(custom_amounts.get(mid) or ZERO) for mid in selected}
    amounts.update({k: to_decimal(v) for k, v in custom_amounts.items() if k not in amounts})

    remaining = total - net_total(amounts[mid] for mid in selected)
    if remaining <= 0 or not selected:
        return amounts

    empty = [mid for mid in selected if amounts[mid] == 0]

    if empty:
        per_member = qround(remaining / len(empty))
        for mid in empty:
            amounts[mid] = per_member
    else:
        per_member = remaining / len(selected)
        for mid in selected:
            amounts[mid] = qround(amounts[mid] + per_member)

    return amounts


def build_custom_splits(
    amount,
    custom_amounts: Mapping[str, Decimal],
    selected: Sequence[str],
) -> List[Split]:
    if not selected:
        raise HTTPException(400, "Please select at least one member")

    total = to_decimal(amount)
    custom_total = net_total(custom_amounts.get(mid) or ZERO for mid in selected)

    if abs(custom_total - total) > TOLERANCE:
        raise HTTPException(
            400,
            f"Split total ({qround(custom_total)}) must equal expense amount ({qround(total)})"
        )

    # members whose share is zero are not part of the expense
    return [
        Split(member_id=mid, amount=qround(to_decimal(custom_amounts[mid])))
        for mid in selected
        if to_decimal(custom_amounts.get(mid) or ZERO) > 0
    ]


def validate_expense(expense: Expense, members: Sequence[Member]) -> Expense:
    known_ids = {m.id for m in members}

    # -----------------------------------
    # 1. Basic fields
    # -----------------------------------
    if not expense.description.strip():
        raise HTTPException(400, "Please enter a description")

    if to_decimal(expense.amount) <= 0:
        raise HTTPException(400, "Please enter a valid amount")

    if expense.paid_by not in known_ids:
        raise HTTPException(400, "Payer is not a member of the group")

    # -----------------------------------
    # 2. Extract & validate split users
    # -----------------------------------
    member_ids = [s.member_id for s in expense.split_between]

    if not member_ids:
        raise HTTPException(400, "Please select at least one member")

    if len(member_ids) != len(set(member_ids)):
        raise HTTPException(400, "Duplicate users found in splits")

    if not set(member_ids) <= known_ids:
        raise HTTPException(400, "One or more users in splits are not members of the group")

    # -----------------------------------
    # 3. Validate amounts
    # -----------------------------------
    if any(to_decimal(s.amount) <= 0 for s in expense.split_between):
        raise HTTPException(400, "Split amounts must be positive")

    total_split = net_total(s.amount for s in expense.split_between)
    if abs(total_split - to_decimal(expense.amount)) > TOLERANCE:
        raise HTTPException(
            400,
            f"Split total ({qround(total_split)}) must equal expense amount ({qround(to_decimal(expense.amount))})"
        )

    # amounts come back rounded to cents
    return expense.model_copy(update={
        "amount": qround(to_decimal(expense.amount)),
        "split_between": [
            Split(member_id=s.member_id, amount=qround(to_decimal(s.amount)))
            for s in expense.split_between
        ],
    })

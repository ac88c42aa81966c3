from typing import List, Sequence
from fastapi import HTTPException
from splitledger.core.utils import qround, to_decimal
from splitledger.schemas.balances import Balance, MemberBalance
from splitledger.schemas.expense import Expense
from splitledger.schemas.member import Member
from splitledger.schemas.settlements import Settlement
from splitledger.services.balance_services import calculate_member_balances, simplify_debts


def validate_settlement(settlement: Settlement, members: Sequence[Member]) -> Settlement:
    """
    Returns the settlement with its amount rounded to cents.
    """
    known_ids = {m.id for m in members}

    if not settlement.from_member or not settlement.to_member:
        raise HTTPException(400, "Please select both members")

    if settlement.from_member not in known_ids:
        raise HTTPException(400, "Payer is not in this group")

    if settlement.to_member not in known_ids:
        raise HTTPException(400, "Receiver is not in this group")

    if settlement.from_member == settlement.to_member:
        raise HTTPException(400, "Cannot settle with same member")

    if to_decimal(settlement.amount) <= 0:
        raise HTTPException(400, "Please enter a valid amount")

    return settlement.model_copy(update={"amount": qround(to_decimal(settlement.amount))})


def suggest_settlement(
    members: Sequence[Member],
    expenses: Sequence[Expense],
    settlements: Sequence[Settlement],
    strict: bool = False,
) -> Balance | None:
    # largest debtor paying largest creditor comes first
    balances = calculate_member_balances(members, expenses, settlements)
    debts = simplify_debts(balances, strict=strict)
    return debts[0] if debts else None


def settle_all(member_balances: Sequence[MemberBalance], strict: bool = False) -> List[Settlement]:
    """
    Settlement records that, once recorded, bring every balance back to zero.
    """
    return [
        Settlement(from_member=d.from_member, to_member=d.to_member, amount=d.amount)
        for d in simplify_debts(member_balances, strict=strict)
    ]

from decimal import Decimal

from splitledger.schemas.balances import MemberBalance
from splitledger.schemas.expense import Expense, Split
from splitledger.schemas.settlements import Settlement


def make_expense(amount, paid_by, shares, description="Dinner"):
    return Expense(
        description=description,
        amount=Decimal(str(amount)),
        paid_by=paid_by,
        split_between=[Split(member_id=m, amount=Decimal(str(a))) for m, a in shares],
    )


def make_settlement(from_member, to_member, amount):
    return Settlement(from_member=from_member, to_member=to_member, amount=Decimal(str(amount)))


def make_balances(**balances):
    return [MemberBalance(member_id=k, balance=Decimal(str(v))) for k, v in balances.items()]


def as_tuples(debts):
    return [(d.from_member, d.to_member, d.amount) for d in debts]

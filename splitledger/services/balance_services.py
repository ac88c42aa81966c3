import logging
from decimal import Decimal
from typing import Dict, List, Sequence
from splitledger.core.exceptions import LedgerImbalanceError
from splitledger.core.utils import CENTS, ZERO, TOLERANCE, match_debts, net_total, qround, to_decimal
from splitledger.schemas.balances import Balance, MemberBalance, MemberSummary
from splitledger.schemas.expense import Expense
from splitledger.schemas.member import Member
from splitledger.schemas.settlements import Settlement

logger = logging.getLogger(__name__)


def _apply_transfer(balances: Dict[str, Decimal], credited: str, debited: str, amount: Decimal):
    """
    The one place the sign convention lives: whoever put money in is
    credited (positive = is owed), whoever received it is debited.
    """
    balances[credited] = balances.get(credited, ZERO) + amount
    balances[debited] = balances.get(debited, ZERO) - amount


def get_net_map(
    members: Sequence[Member],
    expenses: Sequence[Expense],
    settlements: Sequence[Settlement],
) -> Dict[str, Decimal]:
    """
    Unrounded net position per member id.

    Ids that appear in expenses or settlements but not in members are
    still accumulated here; callers restrict to known members.
    """
    balances: Dict[str, Decimal] = {m.id: ZERO for m in members}

    for exp in expenses:
        # payer fronted the whole amount
        balances[exp.paid_by] = balances.get(exp.paid_by, ZERO) + to_decimal(exp.amount)

        # each participant owes their share
        for s in exp.split_between:
            balances[s.member_id] = balances.get(s.member_id, ZERO) - to_decimal(s.amount)

    for st in settlements:
        _apply_transfer(balances, st.from_member, st.to_member, to_decimal(st.amount))

    return balances


def calculate_member_balances(
    members: Sequence[Member],
    expenses: Sequence[Expense],
    settlements: Sequence[Settlement],
) -> List[MemberBalance]:
    net = get_net_map(members, expenses, settlements)

    unknown = set(net) - {m.id for m in members}
    if unknown:
        logger.debug("Dropping balances for unknown member ids: %s", sorted(unknown))

    return [
        MemberBalance(member_id=m.id, balance=qround(net[m.id]))
        for m in members
    ]


def simplify_debts(member_balances: Sequence[MemberBalance], strict: bool = False) -> List[Balance]:
    """
    Standard Greedy algorithm to minimize number of transactions.

    Largest debtor is matched against largest creditor until one side runs
    out. Balances within +/-0.01 of zero count as settled.

    If the balances do not sum to zero (splits that did not add up to the
    expense amount upstream), the leftover is left unmatched and a warning
    is logged. With strict=True a LedgerImbalanceError is raised instead.
    """
    entries = [(mb.member_id, to_decimal(mb.balance)) for mb in member_balances]

    total_debit = net_total(-b for _, b in entries if b < -TOLERANCE)
    total_credit = net_total(b for _, b in entries if b > TOLERANCE)

    # each rounded balance may be off by up to half a cent
    slack = max(TOLERANCE, CENTS / 2 * len(entries))
    if abs(total_debit - total_credit) > slack:
        if strict:
            raise LedgerImbalanceError(qround(total_debit), qround(total_credit))
        logger.warning(
            "Unbalanced ledger: debtors owe %s, creditors are owed %s; residual left unmatched",
            qround(total_debit),
            qround(total_credit),
        )

    transfers = match_debts(entries)
    logger.debug("Simplified %d balances into %d transactions", len(entries), len(transfers))

    return [
        Balance(from_member=f, to_member=t, amount=a)
        for f, t, a in transfers
    ]


def get_balance_summary(
    members: Sequence[Member],
    expenses: Sequence[Expense],
    settlements: Sequence[Settlement],
    strict: bool = False,
) -> List[MemberSummary]:
    member_balances = calculate_member_balances(members, expenses, settlements)
    debts = simplify_debts(member_balances, strict=strict)

    return [
        MemberSummary(
            member=m,
            balance=get_member_balance(member_balances, m.id),
            owes=[d for d in debts if d.from_member == m.id],
            is_owed=[d for d in debts if d.to_member == m.id],
        )
        for m in members
    ]


def get_member_balance(member_balances: Sequence[MemberBalance], member_id: str) -> Decimal:
    for mb in member_balances:
        if mb.member_id == member_id:
            return mb.balance
    return qround(ZERO)


def get_total_expenses(expenses: Sequence[Expense]) -> Decimal:
    return qround(net_total(e.amount for e in expenses))


def is_all_settled(member_balances: Sequence[MemberBalance]) -> bool:
    return all(abs(to_decimal(mb.balance)) <= TOLERANCE for mb in member_balances)

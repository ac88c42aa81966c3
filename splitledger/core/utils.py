from decimal import Decimal, ROUND_HALF_UP, getcontext
from typing import Iterable, List, Tuple

getcontext().prec = 28
CENTS = Decimal("0.01")
ZERO = Decimal("0")

# near-zero band treated as settled
TOLERANCE = Decimal("0.01")


def qround(d: Decimal) -> Decimal:
    return d.quantize(CENTS, rounding=ROUND_HALF_UP)


def to_decimal(value) -> Decimal:
    """
    Coerce int / float / str / Decimal into a Decimal.
    Floats go through str() so 0.1 stays 0.1 instead of 0.1000000000000000055...
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def net_total(amounts: Iterable[Decimal]) -> Decimal:
    return sum((to_decimal(a) for a in amounts), ZERO)


def match_debts(entries: Iterable[Tuple[str, Decimal]]) -> List[Tuple[str, str, Decimal]]:
    """
    Greedy largest-first matching of debtors against creditors.

    Returns (debtor_id, creditor_id, amount) tuples in emission order.
    Each entry is its own party, even when an id repeats.
    Ties keep input order (list.sort is stable).
    """
    creditors = []
    debtors = []

    for uid, bal in entries:
        if bal > TOLERANCE:
            creditors.append([uid, bal])
        elif bal < -TOLERANCE:
            debtors.append([uid, -bal])

    creditors.sort(key=lambda x: x[1], reverse=True)
    debtors.sort(key=lambda x: x[1], reverse=True)

    transfers: List[Tuple[str, str, Decimal]] = []

    i = 0  # debtor cursor
    j = 0  # creditor cursor

    while i < len(debtors) and j < len(creditors):
        debt_id, debt_amt = debtors[i]
        cred_id, cred_amt = creditors[j]

        pay_amt = min(debt_amt, cred_amt)

        if pay_amt > TOLERANCE:
            transfers.append((debt_id, cred_id, qround(pay_amt)))

        debtors[i][1] = debt_amt - pay_amt
        creditors[j][1] = cred_amt - pay_amt

        if debtors[i][1] < TOLERANCE:
            i += 1
        if creditors[j][1] < TOLERANCE:
            j += 1

    return transfers

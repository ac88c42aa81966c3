"""
Greedy debt simplification.

Largest debtor pays largest creditor first; ties keep input order;
balances within a cent of zero are treated as settled.
"""

import logging
from decimal import Decimal

import pytest

from helpers import as_tuples, make_balances, make_expense, make_settlement
from splitledger.core.exceptions import LedgerImbalanceError
from splitledger.schemas.member import Member
from splitledger.services.balance_services import calculate_member_balances, simplify_debts


def test_empty_balances():
    assert simplify_debts([]) == []


def test_all_settled_gives_no_transactions():
    assert simplify_debts(make_balances(A=0, B=0.01, C=-0.01)) == []


def test_equal_split_example(members):
    expense = make_expense(90, "A", [("A", 30), ("B", 30), ("C", 30)])
    balances = calculate_member_balances(members, [expense], [])

    debts = simplify_debts(balances)

    assert as_tuples(debts) == [("B", "A", Decimal("30")), ("C", "A", Decimal("30"))]


def test_largest_debtor_is_matched_first():
    debts = simplify_debts(make_balances(A=50, B=-20, C=-30))

    assert as_tuples(debts) == [("C", "A", Decimal("30")), ("B", "A", Decimal("20"))]


def test_ties_keep_input_order():
    forward = simplify_debts(make_balances(A=-10, B=-10, C=20))
    backward = simplify_debts(make_balances(B=-10, A=-10, C=20))

    assert as_tuples(forward) == [("A", "C", Decimal("10")), ("B", "C", Decimal("10"))]
    assert as_tuples(backward) == [("B", "C", Decimal("10")), ("A", "C", Decimal("10"))]


def test_debtor_split_across_creditors():
    debts = simplify_debts(make_balances(A=69.5, B=-65, C=-19.5, D=15))

    assert as_tuples(debts) == [
        ("B", "A", Decimal("65")),
        ("C", "A", Decimal("4.5")),
        ("C", "D", Decimal("15")),
    ]


def test_at_most_n_minus_one_transactions():
    balances = make_balances(A=40, B=-10, C=-10, D=-10, E=-10)

    assert len(simplify_debts(balances)) <= len(balances) - 1


def test_transaction_amounts_are_positive_and_rounded():
    debts = simplify_debts(make_balances(A=10.004, B=-10.004))

    assert as_tuples(debts) == [("B", "A", Decimal("10.00"))]
    assert str(debts[0].amount) == "10.00"


def test_same_input_same_output():
    balances = make_balances(A=12.5, B=-7.25, C=3.75, D=-9)

    assert simplify_debts(balances) == simplify_debts(balances)


def test_inputs_are_not_modified():
    balances = make_balances(A=30, B=-30)

    simplify_debts(balances)

    assert balances[0].balance == Decimal("30")
    assert balances[1].balance == Decimal("-30")


def test_replaying_debts_as_settlements_zeroes_balances():
    members = [Member(id=m, name=m) for m in "ABCD"]
    expenses = [
        make_expense(120, "A", [("A", 40), ("B", 40), ("C", 40)]),
        make_expense(50, "D", [("B", 25), ("D", 25)]),
        make_expense(31, "C", [("A", 10.5), ("C", 10.5), ("D", 10)]),
    ]

    debts = simplify_debts(calculate_member_balances(members, expenses, []))
    settlements = [make_settlement(d.from_member, d.to_member, d.amount) for d in debts]
    after = calculate_member_balances(members, expenses, settlements)

    assert len(debts) == 3
    assert all(abs(mb.balance) <= Decimal("0.01") for mb in after)


def test_unbalanced_input_leaves_residual_and_warns(caplog):
    with caplog.at_level(logging.WARNING, logger="splitledger"):
        debts = simplify_debts(make_balances(A=50, B=-20))

    assert as_tuples(debts) == [("B", "A", Decimal("20"))]
    assert "Unbalanced ledger" in caplog.text


def test_unbalanced_input_strict_raises():
    with pytest.raises(LedgerImbalanceError) as exc_info:
        simplify_debts(make_balances(A=50, B=-20), strict=True)

    assert exc_info.value.total_debit == Decimal("20")
    assert exc_info.value.total_credit == Decimal("50")


def test_strict_accepts_cent_rounding_drift():
    # three members each rounded by up to half a cent
    debts = simplify_debts(make_balances(A=66.67, B=-33.33, C=-33.33), strict=True)

    assert as_tuples(debts) == [("B", "A", Decimal("33.33")), ("C", "A", Decimal("33.33"))]


def test_repeated_member_id_entries_are_matched_separately():
    balances = make_balances(B=-20) + make_balances(A=10) + make_balances(A=10)

    debts = simplify_debts(balances)

    assert as_tuples(debts) == [("B", "A", Decimal("10")), ("B", "A", Decimal("10"))]

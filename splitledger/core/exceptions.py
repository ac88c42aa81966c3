from decimal import Decimal


class LedgerImbalanceError(Exception):
    """
    Raised by strict debt simplification when what debtors owe does not
    match what creditors are owed, i.e. some expense had splits that
    do not add up to its amount.
    """

    def __init__(self, total_debit: Decimal, total_credit: Decimal):
        self.total_debit = total_debit
        self.total_credit = total_credit
        super().__init__(
            f"Ledger does not balance: debtors owe {total_debit}, "
            f"creditors are owed {total_credit}"
        )


class UnknownCurrencyError(ValueError):
    def __init__(self, currency: str):
        self.currency = currency
        super().__init__(f"Unknown currency code: {currency!r}")

from decimal import Decimal

from babel.core import UnknownLocaleError
from babel.numbers import format_currency as babel_format_currency
from babel.numbers import get_currency_name

from splitledger.core.config import settings
from splitledger.core.exceptions import UnknownCurrencyError
from splitledger.core.utils import qround, to_decimal


def is_known_currency(currency: str) -> bool:
    # babel echoes the code back when it has no name for it
    code = currency.upper()
    return get_currency_name(code, locale="en") != code


def format_currency(amount, currency: str | None = None, locale: str | None = None) -> str:
    """
    Localized display string for an amount, always with 2 fraction digits.

    format_currency(1234.5, "USD") -> "$1,234.50"
    format_currency(-20, "EUR")    -> "-€20.00"
    """
    code = (currency or settings.DEFAULT_CURRENCY).upper()
    if not is_known_currency(code):
        raise UnknownCurrencyError(code)

    value: Decimal = qround(to_decimal(amount))
    try:
        return babel_format_currency(
            value,
            code,
            locale=locale or settings.DEFAULT_LOCALE,
            currency_digits=False,
        )
    except UnknownLocaleError as e:
        raise ValueError(f"Unknown locale: {locale!r}") from e

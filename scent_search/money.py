from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Optional

from .config import CURRENCY_CODE, CURRENCY_LOCALE

EM_DASH = "—"

CURRENCY_SYMBOLS: Dict[str, str] = {
    "INR": "₹",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
}

# Locales that group digits as 2-2-3 (12,34,567) rather than 3-3-3.
_LAKH_GROUPING_LOCALES = {"en-IN", "hi-IN"}


def to_fixed(value: float, digits: int = 1) -> str:
    """
    Format like JavaScript's ``Number.prototype.toFixed``: round half-up on
    the exact binary value, so 4.25 -> "4.3" where ``f"{4.25:.1f}"`` gives "4.2".
    """
    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{rounded:.{digits}f}"


def _group_digits(digits: str, locale: str) -> str:
    if len(digits) <= 3:
        return digits
    if locale in _LAKH_GROUPING_LOCALES:
        head, tail = digits[:-3], digits[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        return ",".join(groups + [tail])
    groups = []
    while digits:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    return ",".join(groups)


def format_currency(
    amount: Optional[float],
    locale: str = CURRENCY_LOCALE,
    currency: str = CURRENCY_CODE,
) -> str:
    """Whole-unit currency string with zero decimals, or an em-dash for None."""
    if amount is None:
        return EM_DASH

    whole = int(Decimal(str(amount)).quantize(Decimal(1), rounding=ROUND_HALF_UP))
    sign = "-" if whole < 0 else ""
    symbol = CURRENCY_SYMBOLS.get(currency, f"{currency} ")
    return f"{sign}{symbol}{_group_digits(str(abs(whole)), locale)}"


def format_paise(
    amount: Optional[int],
    locale: str = CURRENCY_LOCALE,
    currency: str = CURRENCY_CODE,
) -> str:
    """Format an integer minor-unit amount (paise, cents) as whole units."""
    if amount is None:
        return EM_DASH
    return format_currency(Decimal(amount) / 100, locale=locale, currency=currency)

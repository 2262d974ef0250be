"""Presentation helpers turning exact amounts into display strings."""

from decimal import ROUND_HALF_UP, Decimal

from src.domain.constants import (
    DEFAULT_CURRENCY_SYMBOL,
    DEFAULT_DISPLAY_DIGITS,
    is_effectively_zero,
)
from src.domain.models.ledger import Balance


def round_amount(
    amount: Decimal,
    max_digits: int = DEFAULT_DISPLAY_DIGITS,
) -> Decimal:
    """Round half up to ``max_digits`` fraction digits, without negative zero."""
    exponent = Decimal(1).scaleb(-max_digits)
    rounded = amount.quantize(exponent, rounding=ROUND_HALF_UP)
    if rounded == 0:
        rounded = abs(rounded)
    return rounded


def format_amount(
    amount: Decimal,
    symbol: str = DEFAULT_CURRENCY_SYMBOL,
    max_digits: int = DEFAULT_DISPLAY_DIGITS,
) -> str:
    """Format an amount with at most ``max_digits`` fraction digits.

    Trailing zero fraction digits are dropped, so 12.50 renders as 12.5 and
    30.00 as 30.

    Args:
        amount: Exact amount to display.
        symbol: Currency symbol placed before the number.
        max_digits: Maximum fraction digits kept after rounding half up.

    Returns:
        str: Display string such as ``¥1,234.5`` or ``-¥30``.
    """
    rounded = round_amount(amount, max_digits)
    text = f"{abs(rounded):,.{max_digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{text}"


def describe_balance(
    balance: Balance,
    symbol: str = DEFAULT_CURRENCY_SYMBOL,
    max_digits: int = DEFAULT_DISPLAY_DIGITS,
) -> str:
    """Return a caption telling whether a person receives or pays."""
    if is_effectively_zero(balance.amount):
        return "Settled"
    if balance.amount > 0:
        return f"Receivable: {format_amount(balance.amount, symbol, max_digits)}"
    return f"Payable: {format_amount(abs(balance.amount), symbol, max_digits)}"


__all__ = ["round_amount", "format_amount", "describe_balance"]

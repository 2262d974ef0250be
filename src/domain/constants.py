"""Domain constants for ledger balances and settlement."""

from decimal import ROUND_HALF_EVEN, Context, Decimal

# Balances and remaining amounts within this distance of zero are zero.
ZERO_TOLERANCE = Decimal("0.0001")

# Shared read-only context for turning exact shares into Decimal values.
LEDGER_DECIMAL_CONTEXT = Context(prec=28, rounding=ROUND_HALF_EVEN)

DEFAULT_CURRENCY_SYMBOL = "¥"
DEFAULT_DISPLAY_DIGITS = 2


def is_effectively_zero(value: Decimal) -> bool:
    """Return True when the value is within ZERO_TOLERANCE of zero."""
    return abs(value) <= ZERO_TOLERANCE


__all__ = [
    "ZERO_TOLERANCE",
    "LEDGER_DECIMAL_CONTEXT",
    "DEFAULT_CURRENCY_SYMBOL",
    "DEFAULT_DISPLAY_DIGITS",
    "is_effectively_zero",
]

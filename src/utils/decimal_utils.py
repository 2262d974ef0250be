"""Helpers for Decimal normalization."""

from decimal import Decimal


def coerce_decimal(value) -> Decimal:
    """Normalize stored or typed amounts to Decimal.

    Args:
        value: Raw amount from the database (text or numeric) or adapters.

    Returns:
        Decimal: Exact amount, zero when the value is missing.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, str):
        cleaned = value.strip()
        return Decimal(cleaned) if cleaned else Decimal("0")
    return Decimal(str(value))


__all__ = ["coerce_decimal"]

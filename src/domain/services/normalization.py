"""Domain normalization helpers for user-entered values."""

import re
from decimal import Decimal, InvalidOperation

_NON_AMOUNT_CHARS = re.compile(r"[^0-9.]")


def normalize_amount_input(text: str | None) -> str:
    """Clean a typed amount so it only holds a plain decimal number.

    Non digit characters are dropped, extra dots are merged into the first
    one, the fraction is cut to two digits and a leading dot gets a zero.

    Args:
        text: Raw user input.

    Returns:
        str: Cleaned amount text, possibly empty.
    """
    if not text:
        return ""
    cleaned = _NON_AMOUNT_CHARS.sub("", text)
    parts = cleaned.split(".")
    if len(parts) > 2:
        cleaned = parts[0] + "." + "".join(parts[1:])
        parts = cleaned.split(".")
    if len(parts) == 2 and len(parts[1]) > 2:
        cleaned = parts[0] + "." + parts[1][:2]
    if cleaned.startswith("."):
        cleaned = "0" + cleaned
    return cleaned


def parse_amount(text: str | None) -> Decimal | None:
    """Parse a typed amount into a Decimal.

    Args:
        text: Raw user input.

    Returns:
        Decimal | None: Parsed amount, or None when nothing usable remains.
    """
    cleaned = normalize_amount_input(text)
    if not cleaned:
        return None
    try:
        return Decimal(cleaned)
    except InvalidOperation:
        return None


def normalize_person_name(name: str | None) -> str | None:
    if not name:
        return None
    cleaned = name.strip()
    return cleaned or None


__all__ = ["normalize_amount_input", "parse_amount", "normalize_person_name"]

"""Domain services package."""

from .balances import compute_balances
from .formatting import describe_balance, format_amount, round_amount
from .normalization import (
    normalize_amount_input,
    normalize_person_name,
    parse_amount,
)
from .settlement import compute_transfers
from .validation import (
    ExpenseValidationError,
    find_unknown_people,
    validate_expense,
    warn_unknown_people,
)

__all__ = [
    "compute_balances",
    "compute_transfers",
    "describe_balance",
    "format_amount",
    "round_amount",
    "normalize_amount_input",
    "normalize_person_name",
    "parse_amount",
    "ExpenseValidationError",
    "find_unknown_people",
    "validate_expense",
    "warn_unknown_people",
]

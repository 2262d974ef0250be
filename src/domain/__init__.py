"""Domain package for ledger entities and settlement rules."""

from .constants import (
    LEDGER_DECIMAL_CONTEXT,
    ZERO_TOLERANCE,
    is_effectively_zero,
)
from .models import Balance, Expense, Ledger, Person, Transfer
from .services import (
    ExpenseValidationError,
    compute_balances,
    compute_transfers,
    describe_balance,
    find_unknown_people,
    format_amount,
    normalize_amount_input,
    normalize_person_name,
    parse_amount,
    validate_expense,
    warn_unknown_people,
)

__all__ = [
    "Person",
    "Expense",
    "Ledger",
    "Balance",
    "Transfer",
    "LEDGER_DECIMAL_CONTEXT",
    "ZERO_TOLERANCE",
    "is_effectively_zero",
    "compute_balances",
    "compute_transfers",
    "describe_balance",
    "format_amount",
    "normalize_amount_input",
    "normalize_person_name",
    "parse_amount",
    "ExpenseValidationError",
    "find_unknown_people",
    "validate_expense",
    "warn_unknown_people",
]

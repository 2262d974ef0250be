"""Domain models package."""

from .ledger import Balance, Expense, Ledger, Person, Transfer

__all__ = [
    "Person",
    "Expense",
    "Ledger",
    "Balance",
    "Transfer",
]

"""Domain validation helpers for expenses and ledgers."""

from decimal import Decimal

from src.domain.models.ledger import Expense, Ledger, Person


class ExpenseValidationError(ValueError):
    """Raised when an expense cannot be recorded in a ledger."""


def validate_expense(expense: Expense) -> None:
    """Reject expenses that must not reach the balance computation.

    Args:
        expense: Expense about to be recorded.

    Raises:
        ExpenseValidationError: If the title is blank, the amount is not a
            strictly positive finite number, or nobody shares the cost.
    """
    if not expense.title.strip():
        raise ExpenseValidationError("Expense title must not be blank")
    amount = expense.amount
    if not isinstance(amount, Decimal) or not amount.is_finite():
        raise ExpenseValidationError(
            f"Expense amount must be a finite Decimal, got {amount!r}"
        )
    if amount <= 0:
        raise ExpenseValidationError(
            f"Expense amount must be positive, got {amount}"
        )
    if not expense.participants:
        raise ExpenseValidationError(
            f"Expense '{expense.title}' has no participants"
        )


def find_unknown_people(ledger: Ledger) -> list[Person]:
    """Return people used by expenses but missing from the participants.

    Args:
        ledger: Ledger to inspect.

    Returns:
        list[Person]: Unknown people in order of first appearance.
    """
    known = set(ledger.participants)
    unknown: dict[Person, None] = {}
    for expense in ledger.expenses:
        for person in (expense.payer, *expense.participants):
            if person not in known:
                unknown.setdefault(person, None)
    return list(unknown)


def warn_unknown_people(ledger: Ledger, logger) -> None:
    """Warn about expenses referencing people outside the ledger.

    Args:
        ledger: Ledger to inspect.
        logger: Logger compatible with logging.Logger-like API.
    """
    for person in find_unknown_people(ledger):
        logger.warning(
            f"Ledger {ledger.id} references unknown person "
            f"{person.id} ({person.name})"
        )


__all__ = [
    "ExpenseValidationError",
    "validate_expense",
    "find_unknown_people",
    "warn_unknown_people",
]

"""Domain service folding a ledger's expenses into net balances."""

from decimal import Decimal
from fractions import Fraction

from src.domain.constants import LEDGER_DECIMAL_CONTEXT
from src.domain.models.ledger import Balance, Ledger, Person


def compute_balances(
    ledger: Ledger,
    *,
    logger=None,
) -> list[Balance]:
    """Compute the net balance of every person in a ledger.

    Each expense credits its payer with the full amount and debits every
    participant, payer included when listed, with an equal share. Shares are
    accumulated as exact fractions and converted to Decimal once at the end,
    so the result does not depend on the order of the expenses.

    Expenses without participants are skipped. People referenced by an
    expense but missing from the ledger participants get a balance entry.

    Args:
        ledger: Ledger snapshot to evaluate.
        logger: Optional logger compatible with logging.Logger-like API.

    Returns:
        list[Balance]: Balances sorted by person name, then identifier.
    """
    totals: dict[Person, Fraction] = {
        person: Fraction(0) for person in ledger.participants
    }

    for expense in ledger.expenses:
        participants = tuple(dict.fromkeys(expense.participants))
        if not participants:
            if logger is not None:
                logger.debug(
                    f"Skipping expense {expense.id} without participants"
                )
            continue

        amount = Fraction(expense.amount)
        share = amount / len(participants)

        _credit(totals, expense.payer, amount, logger)
        for participant in participants:
            _credit(totals, participant, -share, logger)

    balances = [
        Balance(person=person, amount=_to_decimal(total))
        for person, total in totals.items()
    ]
    return sorted(balances, key=lambda balance: balance.person.display_key)


def _credit(
    totals: dict[Person, Fraction],
    person: Person,
    amount: Fraction,
    logger,
) -> None:
    if person not in totals:
        if logger is not None:
            logger.debug(
                f"Person {person.id} ({person.name}) is not a ledger "
                "participant, adding a balance entry"
            )
        totals[person] = Fraction(0)
    totals[person] += amount


def _to_decimal(value: Fraction) -> Decimal:
    return LEDGER_DECIMAL_CONTEXT.divide(
        Decimal(value.numerator),
        Decimal(value.denominator),
    )


__all__ = ["compute_balances"]

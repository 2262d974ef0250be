"""Domain service planning the transfers that settle a set of balances."""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal, localcontext

from src.domain.constants import LEDGER_DECIMAL_CONTEXT, is_effectively_zero
from src.domain.models.ledger import Balance, Person, Transfer


@dataclass
class _Party:
    person: Person
    remaining: Decimal


def compute_transfers(
    balances: Iterable[Balance],
    *,
    logger=None,
) -> list[Transfer]:
    """Return transfers that drive every balance to zero.

    Greedy matching: the largest remaining debtor pays the largest remaining
    creditor the smaller of the two amounts, then whichever side reaches zero
    is dropped. This runs in O(n log n) and every step retires at least one
    party, so the plan is never longer than the number of parties. Finding
    the minimum number of transfers is NP-hard and is not attempted;
    switching to an exact solver would also change the ordering contract
    below.

    Ties on amount are broken by person name, then identifier, so the plan is
    reproducible. If the balances do not sum to zero, the loop still ends
    when either side is exhausted and the residual is left unsettled.

    Args:
        balances: Net balances, typically from ``compute_balances``.
        logger: Optional logger compatible with logging.Logger-like API.

    Returns:
        list[Transfer]: Transfers in the order they were planned.
    """
    balances = list(balances)
    creditors = _ranked(
        _Party(balance.person, balance.amount)
        for balance in balances
        if balance.is_creditor
    )
    debtors = _ranked(
        _Party(balance.person, -balance.amount)
        for balance in balances
        if balance.is_debtor
    )

    transfers: list[Transfer] = []
    i = 0
    j = 0
    with localcontext(LEDGER_DECIMAL_CONTEXT):
        while i < len(debtors) and j < len(creditors):
            debtor = debtors[i]
            creditor = creditors[j]
            pay = min(debtor.remaining, creditor.remaining)
            if is_effectively_zero(pay):
                break
            transfers.append(
                Transfer(
                    from_person=debtor.person,
                    to_person=creditor.person,
                    amount=pay,
                )
            )
            debtor.remaining -= pay
            creditor.remaining -= pay
            if is_effectively_zero(debtor.remaining):
                i += 1
            if is_effectively_zero(creditor.remaining):
                j += 1

    if logger is not None:
        unsettled = [
            party
            for party in debtors[i:] + creditors[j:]
            if not is_effectively_zero(party.remaining)
        ]
        if unsettled:
            logger.debug(
                f"{len(unsettled)} balances left unsettled after "
                f"{len(transfers)} transfers"
            )
    return transfers


def _ranked(parties: Iterable[_Party]) -> list[_Party]:
    return sorted(
        parties,
        key=lambda party: (-party.remaining, party.person.display_key),
    )


__all__ = ["compute_transfers"]

"""Domain models for shared-expense ledgers."""

from dataclasses import dataclass, field
from decimal import Decimal

from src.domain.constants import ZERO_TOLERANCE


@dataclass(frozen=True, order=True)
class Person:
    """Participant of a ledger.

    Equality, hashing and natural ordering only look at ``id`` so a renamed
    person stays the same person. Use ``display_key`` for presentation order.

    Attributes:
        id: Stable identifier.
        name: Display name.
    """

    id: str
    name: str = field(compare=False)

    @property
    def display_key(self) -> tuple[str, str]:
        """Return the (name, id) key used for display and tie-breaks."""
        return (self.name, self.id)


@dataclass(frozen=True)
class Expense:
    """A single payment shared equally among its participants.

    Attributes:
        id: Stable identifier.
        title: Short description.
        amount: Amount paid, strictly positive once validated.
        payer: Person who paid.
        participants: People sharing the cost, the payer may or may not be
            one of them.
    """

    id: str
    title: str
    amount: Decimal
    payer: Person
    participants: tuple[Person, ...] = ()


@dataclass(frozen=True)
class Ledger:
    """Participants and expenses forming one settlement domain."""

    id: str
    title: str
    owner_id: str = ""
    member_ids: tuple[str, ...] = ()
    participants: tuple[Person, ...] = ()
    expenses: tuple[Expense, ...] = ()

    @property
    def all_member_ids(self) -> tuple[str, ...]:
        """Return the owner followed by the additional members."""
        return (self.owner_id, *self.member_ids)

    @property
    def member_count(self) -> int:
        return 1 + len(self.member_ids)


@dataclass(frozen=True)
class Balance:
    """Net position of a person.

    Attributes:
        person: Person the balance belongs to.
        amount: Positive when the person is owed money, negative when the
            person owes money.
    """

    person: Person
    amount: Decimal

    @property
    def is_creditor(self) -> bool:
        return self.amount > ZERO_TOLERANCE

    @property
    def is_debtor(self) -> bool:
        return self.amount < -ZERO_TOLERANCE

    @property
    def is_settled(self) -> bool:
        return not (self.is_creditor or self.is_debtor)


@dataclass(frozen=True)
class Transfer:
    """Payment from a debtor to a creditor."""

    from_person: Person
    to_person: Person
    amount: Decimal


__all__ = ["Person", "Expense", "Ledger", "Balance", "Transfer"]

"""Use case for editing ledgers, their participants and expenses.

Ledgers are immutable snapshots: every change builds a new snapshot with
``dataclasses.replace`` and hands it to the repository.
"""

import uuid
from dataclasses import replace
from decimal import Decimal
from typing import Callable, Iterable

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.errors import (
    DuplicateParticipantError,
    LedgerNotFoundError,
    ParticipantInUseError,
    ParticipantNotFoundError,
)
from src.domain.models.ledger import Expense, Ledger, Person
from src.domain.services.normalization import (
    normalize_person_name,
    parse_amount,
)
from src.domain.services.validation import (
    ExpenseValidationError,
    validate_expense,
)
from src.infrastructure.logging.logger import get_app_logger


def _new_id() -> str:
    return str(uuid.uuid4())


class ManageLedgerUseCase:
    """Create and edit ledgers through the repository port."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port persisting ledger snapshots.
            logger: Optional logger compatible with logging.Logger-like API.
            id_factory: Optional factory for new identifiers.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._new_id = id_factory or _new_id

    def list_ledgers(self) -> list[Ledger]:
        return self._ledger_repository.list_ledgers()

    def get_ledger(self, ledger_id: str) -> Ledger:
        ledger = self._ledger_repository.get_ledger(ledger_id)
        if ledger is None:
            raise LedgerNotFoundError(ledger_id)
        return ledger

    def create_ledger(
        self,
        title: str,
        owner_id: str = "",
        participant_names: Iterable[str] = (),
        member_ids: Iterable[str] = (),
    ) -> Ledger:
        """Create and store an empty ledger.

        Args:
            title: Ledger title, must not be blank.
            owner_id: Identifier of the owning account.
            participant_names: Names of the initial participants.
            member_ids: Accounts sharing the ledger besides the owner.

        Returns:
            Ledger: Stored ledger.

        Raises:
            ValueError: If the title is blank.
            DuplicateParticipantError: If a name is listed twice.
        """
        cleaned_title = title.strip()
        if not cleaned_title:
            raise ValueError("Ledger title must not be blank")
        ledger_id = self._new_id()
        names: list[str] = []
        for raw in participant_names:
            name = normalize_person_name(raw)
            if name is None:
                continue
            if name in names:
                raise DuplicateParticipantError(ledger_id, name)
            names.append(name)
        participants = tuple(
            Person(id=self._new_id(), name=name) for name in names
        )
        members = tuple(
            dict.fromkeys(m for m in member_ids if m and m != owner_id)
        )
        ledger = Ledger(
            id=ledger_id,
            title=cleaned_title,
            owner_id=owner_id,
            member_ids=members,
            participants=participants,
        )
        self._ledger_repository.save_ledger(ledger)
        self._logger.info(
            f"Created ledger {ledger.id} with {len(participants)} participants"
        )
        return ledger

    def add_participant(self, ledger_id: str, name: str) -> Person:
        """Add a person to a ledger.

        Raises:
            LedgerNotFoundError: If the ledger does not exist.
            ValueError: If the name is blank.
            DuplicateParticipantError: If the name is already taken.
        """
        ledger = self.get_ledger(ledger_id)
        cleaned = normalize_person_name(name)
        if cleaned is None:
            raise ValueError("Participant name must not be blank")
        if any(p.name == cleaned for p in ledger.participants):
            raise DuplicateParticipantError(ledger.id, cleaned)
        person = Person(id=self._new_id(), name=cleaned)
        self._ledger_repository.save_ledger(
            replace(ledger, participants=(*ledger.participants, person))
        )
        return person

    def remove_participant(self, ledger_id: str, person_id: str) -> Ledger:
        """Remove a participant who has no expenses yet.

        Raises:
            LedgerNotFoundError: If the ledger does not exist.
            ParticipantNotFoundError: If the person is not a participant.
            ParticipantInUseError: If the person paid or shares an expense.
        """
        ledger = self.get_ledger(ledger_id)
        person = self._find_participant(ledger, person_id)
        for expense in ledger.expenses:
            if expense.payer.id == person_id or any(
                p.id == person_id for p in expense.participants
            ):
                raise ParticipantInUseError(ledger.id, person.name)
        updated = replace(
            ledger,
            participants=tuple(
                p for p in ledger.participants if p.id != person_id
            ),
        )
        self._ledger_repository.save_ledger(updated)
        self._logger.info(
            f"Removed participant {person_id} from ledger {ledger.id}"
        )
        return updated

    def rename_participant(
        self,
        ledger_id: str,
        person_id: str,
        name: str,
    ) -> Ledger:
        """Rename a participant everywhere it appears in the ledger.

        The identifier is kept, so balances computed before and after the
        rename refer to the same person.

        Raises:
            LedgerNotFoundError: If the ledger does not exist.
            ParticipantNotFoundError: If the person is not a participant.
            ValueError: If the name is blank.
        """
        ledger = self.get_ledger(ledger_id)
        self._find_participant(ledger, person_id)
        cleaned = normalize_person_name(name)
        if cleaned is None:
            raise ValueError("Participant name must not be blank")
        renamed = Person(id=person_id, name=cleaned)

        def _swap(person: Person) -> Person:
            return renamed if person.id == person_id else person

        updated = replace(
            ledger,
            participants=tuple(_swap(p) for p in ledger.participants),
            expenses=tuple(
                replace(
                    expense,
                    payer=_swap(expense.payer),
                    participants=tuple(
                        _swap(p) for p in expense.participants
                    ),
                )
                for expense in ledger.expenses
            ),
        )
        self._ledger_repository.save_ledger(updated)
        return updated

    def record_expense(
        self,
        ledger_id: str,
        title: str,
        amount: Decimal | str,
        payer_id: str,
        participant_ids: Iterable[str],
        expense_id: str | None = None,
    ) -> Expense:
        """Add an expense, or replace the one with the same identifier.

        Args:
            ledger_id: Ledger receiving the expense.
            title: Expense title.
            amount: Decimal amount or the text typed by the user.
            payer_id: Identifier of the paying participant.
            participant_ids: Identifiers of the participants sharing it.
            expense_id: Identifier of an existing expense to edit.

        Returns:
            Expense: Stored expense.

        Raises:
            LedgerNotFoundError: If the ledger does not exist.
            ParticipantNotFoundError: If a person is not a participant.
            ExpenseValidationError: If the expense is not valid.
        """
        ledger = self.get_ledger(ledger_id)
        if isinstance(amount, str):
            parsed = parse_amount(amount)
            if parsed is None:
                raise ExpenseValidationError(
                    f"Expense amount is not a number: {amount!r}"
                )
            amount = parsed
        payer = self._find_participant(ledger, payer_id)
        participants = tuple(
            self._find_participant(ledger, person_id)
            for person_id in dict.fromkeys(participant_ids)
        )
        expense = Expense(
            id=expense_id or self._new_id(),
            title=title.strip(),
            amount=amount,
            payer=payer,
            participants=participants,
        )
        validate_expense(expense)

        expenses = list(ledger.expenses)
        for index, existing in enumerate(expenses):
            if existing.id == expense.id:
                expenses[index] = expense
                break
        else:
            expenses.append(expense)
        self._ledger_repository.save_ledger(
            replace(ledger, expenses=tuple(expenses))
        )
        self._logger.info(
            f"Recorded expense {expense.id} in ledger {ledger.id}"
        )
        return expense

    def delete_expense(self, ledger_id: str, expense_id: str) -> bool:
        ledger = self.get_ledger(ledger_id)
        remaining = tuple(e for e in ledger.expenses if e.id != expense_id)
        if len(remaining) == len(ledger.expenses):
            return False
        self._ledger_repository.save_ledger(
            replace(ledger, expenses=remaining)
        )
        return True

    def delete_ledger(self, ledger_id: str) -> bool:
        deleted = self._ledger_repository.delete_ledger(ledger_id)
        if deleted:
            self._logger.info(f"Deleted ledger {ledger_id}")
        else:
            self._logger.warning(f"Ledger {ledger_id} was already deleted")
        return deleted

    @staticmethod
    def _find_participant(ledger: Ledger, person_id: str) -> Person:
        for person in ledger.participants:
            if person.id == person_id:
                return person
        raise ParticipantNotFoundError(ledger.id, person_id)


__all__ = ["ManageLedgerUseCase"]

"""Errors raised by ledger use cases."""


class LedgerNotFoundError(LookupError):
    """Raised when a ledger identifier is unknown to the repository."""

    def __init__(self, ledger_id: str) -> None:
        super().__init__(f"Ledger not found: {ledger_id}")
        self.ledger_id = ledger_id


class ParticipantNotFoundError(LookupError):
    """Raised when a person identifier is not a participant of a ledger."""

    def __init__(self, ledger_id: str, person_id: str) -> None:
        super().__init__(
            f"Person {person_id} is not a participant of ledger {ledger_id}"
        )
        self.ledger_id = ledger_id
        self.person_id = person_id


class DuplicateParticipantError(ValueError):
    """Raised when a participant name is already used in a ledger."""

    def __init__(self, ledger_id: str, name: str) -> None:
        super().__init__(
            f"Participant '{name}' already exists in ledger {ledger_id}"
        )
        self.ledger_id = ledger_id
        self.name = name


class ParticipantInUseError(ValueError):
    """Raised when removing a person who appears in an expense."""

    def __init__(self, ledger_id: str, person: str) -> None:
        super().__init__(
            f"Participant '{person}' appears in an expense of ledger "
            f"{ledger_id} and cannot be removed"
        )
        self.ledger_id = ledger_id
        self.person = person


__all__ = [
    "LedgerNotFoundError",
    "ParticipantNotFoundError",
    "DuplicateParticipantError",
    "ParticipantInUseError",
]

"""Port for reading and writing ledgers."""

from typing import Protocol

from src.domain.models.ledger import Ledger


class LedgerRepositoryPort(Protocol):
    """Port exposing persistence of ledger snapshots."""

    def list_ledgers(self) -> list[Ledger]:
        """Return every stored ledger sorted by title, then identifier."""

    def get_ledger(self, ledger_id: str) -> Ledger | None:
        """Return the ledger with the given identifier, if stored."""

    def save_ledger(self, ledger: Ledger) -> None:
        """Insert the ledger or replace the stored version."""

    def delete_ledger(self, ledger_id: str) -> bool:
        """Delete a ledger and report whether it existed."""


__all__ = ["LedgerRepositoryPort"]

"""Use case computing balances and a settlement plan for a ledger."""

from dataclasses import dataclass

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.errors import LedgerNotFoundError
from src.domain.models.ledger import Balance, Ledger, Transfer
from src.domain.services.balances import compute_balances
from src.domain.services.settlement import compute_transfers
from src.domain.services.validation import warn_unknown_people
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class LedgerSettlement:
    """Balances and transfers computed from one ledger snapshot.

    Attributes:
        ledger: Snapshot the figures were computed from.
        balances: Net balance per person, sorted by name.
        transfers: Planned transfers settling every balance.
    """

    ledger: Ledger
    balances: list[Balance]
    transfers: list[Transfer]

    @property
    def is_settled(self) -> bool:
        """Return True when nobody owes anything."""
        return not self.transfers


def settle_ledger(ledger: Ledger, logger=None) -> LedgerSettlement:
    """Compute the settlement of an in-memory ledger.

    Args:
        ledger: Ledger snapshot.
        logger: Optional logger compatible with logging.Logger-like API.

    Returns:
        LedgerSettlement: Balances and transfers for the snapshot.
    """
    balances = compute_balances(ledger, logger=logger)
    transfers = compute_transfers(balances, logger=logger)
    return LedgerSettlement(
        ledger=ledger,
        balances=balances,
        transfers=transfers,
    )


class GetLedgerSettlementUseCase:
    """Load a ledger and compute who owes whom."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing ledger snapshots.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(self, ledger_id: str) -> LedgerSettlement:
        """Return balances and transfers for the ledger.

        Args:
            ledger_id: Identifier of the ledger to settle.

        Returns:
            LedgerSettlement: Computed balances and transfers.

        Raises:
            LedgerNotFoundError: If the repository has no such ledger.
        """
        ledger = self._ledger_repository.get_ledger(ledger_id)
        if ledger is None:
            raise LedgerNotFoundError(ledger_id)

        warn_unknown_people(ledger, self._logger)
        settlement = settle_ledger(ledger, logger=self._logger)
        self._logger.info(
            f"Settled ledger {ledger.id}: {len(ledger.expenses)} expenses, "
            f"{len(settlement.balances)} balances, "
            f"{len(settlement.transfers)} transfers"
        )
        return settlement


__all__ = [
    "GetLedgerSettlementUseCase",
    "LedgerSettlement",
    "settle_ledger",
]

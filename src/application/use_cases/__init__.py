"""Application use cases package."""

from .errors import (
    DuplicateParticipantError,
    LedgerNotFoundError,
    ParticipantInUseError,
    ParticipantNotFoundError,
)
from .export_ledgers import ExportLedgersUseCase
from .get_ledger_settlement import (
    GetLedgerSettlementUseCase,
    LedgerSettlement,
    settle_ledger,
)
from .manage_ledgers import ManageLedgerUseCase

__all__ = [
    "DuplicateParticipantError",
    "LedgerNotFoundError",
    "ParticipantInUseError",
    "ParticipantNotFoundError",
    "ExportLedgersUseCase",
    "GetLedgerSettlementUseCase",
    "LedgerSettlement",
    "settle_ledger",
    "ManageLedgerUseCase",
]

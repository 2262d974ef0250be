"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.export_ledgers import ExportLedgersUseCase
from src.application.use_cases.get_ledger_settlement import (
    GetLedgerSettlementUseCase,
)
from src.application.use_cases.manage_ledgers import ManageLedgerUseCase
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
) -> LedgerRepositoryPort:
    """Return the ledger repository with its tables in place."""
    resolved_db = db_port or build_database_adapter()
    repository = SqlAlchemyLedgerRepository(
        resolved_db,
        logger=get_app_logger(),
    )
    repository.prepare_storage()
    return repository


def build_settlement_use_case(
    repository: LedgerRepositoryPort | None = None,
) -> GetLedgerSettlementUseCase:
    """Return the use case computing balances and transfers."""
    return GetLedgerSettlementUseCase(
        repository or build_ledger_repository(),
        logger=get_app_logger(),
    )


def build_manage_ledger_use_case(
    repository: LedgerRepositoryPort | None = None,
) -> ManageLedgerUseCase:
    """Return the use case editing ledgers."""
    return ManageLedgerUseCase(
        repository or build_ledger_repository(),
        logger=get_app_logger(),
    )


def build_export_use_case(
    repository: LedgerRepositoryPort | None = None,
    settings: LedgerSettings | None = None,
) -> ExportLedgersUseCase:
    """Return the text export use case using display settings."""
    resolved_settings = settings or LedgerSettings.from_env()
    return ExportLedgersUseCase(
        repository or build_ledger_repository(),
        logger=get_app_logger(),
        currency_symbol=resolved_settings.currency_symbol,
        display_digits=resolved_settings.display_digits,
    )


__all__ = [
    "build_database_adapter",
    "build_ledger_repository",
    "build_settlement_use_case",
    "build_manage_ledger_use_case",
    "build_export_use_case",
]

"""Simple CLI to validate the ledger database connection.

This adapter is meant for local operations: it instantiates the concrete
database adapter from the infrastructure layer, runs a basic health check
and makes sure the ledger tables exist.
"""

from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run a connectivity check against the configured ledger database."""
    adapter = SqlAlchemyDatabaseEngineAdapter()
    logger = get_app_logger()

    engine = adapter.get_ledger_engine()
    logger.info(f"Ledger DB: {engine.url}")

    with engine.connect() as conn:
        conn.exec_driver_sql("SELECT 1")
    SqlAlchemyLedgerRepository(adapter, logger=logger).prepare_storage()

    logger.info("Ledger database is reachable and its tables are ready.")


if __name__ == "__main__":  # pragma: no cover
    main()

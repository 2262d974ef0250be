"""Tests for the check_db_connection adapter."""

from unittest.mock import MagicMock

from src.adapters import check_db_connection


def test_main_pings_database_and_prepares_tables(monkeypatch) -> None:
    engine = MagicMock()
    conn = engine.connect.return_value.__enter__.return_value
    adapter = MagicMock()
    adapter.get_ledger_engine.return_value = engine
    repository = MagicMock()
    logger = MagicMock()

    monkeypatch.setattr(
        check_db_connection,
        "SqlAlchemyDatabaseEngineAdapter",
        lambda: adapter,
    )
    monkeypatch.setattr(
        check_db_connection,
        "SqlAlchemyLedgerRepository",
        lambda db_port, logger=None: repository,
    )
    monkeypatch.setattr(check_db_connection, "get_app_logger", lambda: logger)

    check_db_connection.main()

    conn.exec_driver_sql.assert_called_once_with("SELECT 1")
    repository.prepare_storage.assert_called_once()
    assert logger.info.call_count == 2

"""Tests for the manage_ledger_cli adapter."""

from itertools import count
from unittest.mock import MagicMock

import pytest

from src.adapters import manage_ledger_cli
from src.application.use_cases.manage_ledgers import ManageLedgerUseCase
from src.domain.models import Ledger
from src.infrastructure.settings import LedgerSettings


class _Logger:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def error(self, msg: str) -> None:
        self.messages.append(msg)

    def info(self, msg: str) -> None:
        self.messages.append(msg)


class _MemoryRepository:
    def __init__(self) -> None:
        self.ledgers: dict[str, Ledger] = {}

    def list_ledgers(self) -> list[Ledger]:
        return sorted(self.ledgers.values(), key=lambda l: (l.title, l.id))

    def get_ledger(self, ledger_id: str) -> Ledger | None:
        return self.ledgers.get(ledger_id)

    def save_ledger(self, ledger: Ledger) -> None:
        self.ledgers[ledger.id] = ledger

    def delete_ledger(self, ledger_id: str) -> bool:
        return self.ledgers.pop(ledger_id, None) is not None


def _patch(monkeypatch) -> tuple[_Logger, _MemoryRepository]:
    logger = _Logger()
    repository = _MemoryRepository()
    ids = count(1)
    use_case = ManageLedgerUseCase(
        repository,
        logger=MagicMock(),
        id_factory=lambda: f"id-{next(ids)}",
    )
    monkeypatch.setattr(manage_ledger_cli, "get_app_logger", lambda: logger)
    monkeypatch.setattr(manage_ledger_cli, "get_usage_logger", lambda: logger)
    monkeypatch.setattr(
        manage_ledger_cli,
        "build_manage_ledger_use_case",
        lambda: use_case,
    )
    monkeypatch.setattr(
        manage_ledger_cli.LedgerSettings,
        "from_env",
        classmethod(lambda cls: LedgerSettings(database_url="sqlite://")),
    )
    return logger, repository


def test_create_add_and_record_expense(monkeypatch, capsys) -> None:
    """Commands build a ledger that the list command then shows."""
    logger, repository = _patch(monkeypatch)

    manage_ledger_cli.main(
        ["create", "Trip", "--participant", "Ann", "--participant", "Ben"]
    )
    manage_ledger_cli.main(["add-participant", "id-1", "Cat"])
    manage_ledger_cli.main(
        [
            "record-expense",
            "id-1",
            "Dinner",
            "90",
            "--payer",
            "id-2",
            "--participant",
            "id-2",
            "--participant",
            "id-3",
            "--participant",
            "id-4",
        ]
    )

    out = capsys.readouterr().out
    assert "[id-1] Trip" in out
    assert "Added Cat (id-4)" in out
    assert "Recorded Dinner: ¥90 (paid by Ann) [id-5]" in out

    ledger = repository.get_ledger("id-1")
    assert [p.name for p in ledger.participants] == ["Ann", "Ben", "Cat"]
    assert len(ledger.expenses) == 1

    manage_ledger_cli.main(["list"])

    out = capsys.readouterr().out
    assert "  id-4: Cat" in out
    assert "  1 expenses, total ¥90" in out
    assert "Ledger command list completed" in logger.messages


def test_list_without_ledgers(monkeypatch, capsys) -> None:
    _patch(monkeypatch)

    manage_ledger_cli.main(["list"])

    assert "No ledgers found." in capsys.readouterr().out


def test_rejected_commands_are_logged(monkeypatch, capsys) -> None:
    """Use case errors are logged and nothing is printed."""
    logger, repository = _patch(monkeypatch)
    manage_ledger_cli.main(["create", "Trip", "--participant", "Ann"])
    capsys.readouterr()

    manage_ledger_cli.main(["add-participant", "id-1", "Ann"])
    manage_ledger_cli.main(["remove-participant", "missing", "id-2"])
    manage_ledger_cli.main(
        [
            "record-expense",
            "id-1",
            "Dinner",
            "0",
            "--payer",
            "id-2",
            "--participant",
            "id-2",
        ]
    )

    assert capsys.readouterr().out == ""
    assert "Participant 'Ann' already exists in ledger id-1" in logger.messages
    assert "Ledger not found: missing" in logger.messages
    assert any("must be positive" in msg for msg in logger.messages)
    assert repository.get_ledger("id-1").expenses == ()


def test_remove_participant_in_use_is_refused(monkeypatch, capsys) -> None:
    logger, repository = _patch(monkeypatch)
    manage_ledger_cli.main(
        ["create", "Trip", "--participant", "Ann", "--participant", "Ben"]
    )
    manage_ledger_cli.main(
        [
            "record-expense",
            "id-1",
            "Taxi",
            "12",
            "--payer",
            "id-2",
            "--participant",
            "id-3",
        ]
    )

    manage_ledger_cli.main(["remove-participant", "id-1", "id-3"])

    assert any("cannot be removed" in msg for msg in logger.messages)
    assert len(repository.get_ledger("id-1").participants) == 2


def test_unknown_command_exits(monkeypatch) -> None:
    _patch(monkeypatch)

    with pytest.raises(SystemExit):
        manage_ledger_cli.main(["rename-everything"])


def test_list_shows_owner_and_member_accounts(monkeypatch, capsys) -> None:
    _patch(monkeypatch)
    manage_ledger_cli.main(
        ["create", "Flat", "--owner", "u1", "--member", "u2", "--member", "u1"]
    )

    out = capsys.readouterr().out

    assert "[id-1] Flat" in out
    assert "  2 accounts: u1, u2" in out

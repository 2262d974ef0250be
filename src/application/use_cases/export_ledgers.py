"""Use case rendering every ledger as a plain-text summary."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.constants import DEFAULT_CURRENCY_SYMBOL, DEFAULT_DISPLAY_DIGITS
from src.domain.models.ledger import Ledger
from src.domain.services.formatting import format_amount
from src.infrastructure.logging.logger import get_app_logger

EXPORT_HEADER = "Ledger export\n=============\n\n"


class ExportLedgersUseCase:
    """Export all ledgers with their members and expenses."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
        display_digits: int = DEFAULT_DISPLAY_DIGITS,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._currency_symbol = currency_symbol
        self._display_digits = display_digits

    def execute(self) -> str:
        """Return the text export of every stored ledger."""
        ledgers = self._ledger_repository.list_ledgers()
        text = EXPORT_HEADER + "".join(
            self._render_ledger(ledger) for ledger in ledgers
        )
        self._logger.info(f"Exported {len(ledgers)} ledgers")
        return text

    def _render_ledger(self, ledger: Ledger) -> str:
        lines = [f"[{ledger.title}]"]
        if ledger.participants:
            names = ", ".join(person.name for person in ledger.participants)
            lines.append(f"Members: {names}")
        if ledger.expenses:
            lines.append("Expenses:")
            for expense in ledger.expenses:
                amount = format_amount(
                    expense.amount,
                    self._currency_symbol,
                    self._display_digits,
                )
                lines.append(
                    f"  • {expense.title}: {amount} "
                    f"(paid by {expense.payer.name})"
                )
        else:
            lines.append("No expenses")
        return "\n".join(lines) + "\n\n"


__all__ = ["ExportLedgersUseCase", "EXPORT_HEADER"]

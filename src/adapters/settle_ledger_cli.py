"""CLI adapter printing balances and transfers for one ledger.

The ledger identifier is read from the first argument or from LEDGER_ID.
"""

import os
import sys

from src.application.use_cases.errors import LedgerNotFoundError
from src.domain.services.formatting import describe_balance, format_amount
from src.infrastructure.container import build_settlement_use_case
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.settings import LedgerSettings


def main(argv: list[str] | None = None) -> None:
    """Settle a ledger and print the result."""
    logger = get_app_logger()
    args = sys.argv[1:] if argv is None else argv
    ledger_id = args[0] if args else os.getenv("LEDGER_ID")
    if not ledger_id:
        logger.warning("Pass a ledger id or set LEDGER_ID.")
        return

    settings = LedgerSettings.from_env()
    use_case = build_settlement_use_case()
    try:
        settlement = use_case.execute(ledger_id)
    except LedgerNotFoundError as exc:
        logger.error(str(exc))
        return
    get_usage_logger().info(f"Settlement printed for ledger {ledger_id}")

    symbol = settings.currency_symbol
    digits = settings.display_digits
    print(f"Ledger: {settlement.ledger.title}")
    print("Balances:")
    for balance in settlement.balances:
        print(
            f"  {balance.person.name}: "
            f"{describe_balance(balance, symbol, digits)}"
        )
    print("Transfers:")
    if settlement.is_settled:
        print("  Everyone is settled up.")
    for transfer in settlement.transfers:
        print(
            f"  {transfer.from_person.name} -> {transfer.to_person.name}: "
            f"{format_amount(transfer.amount, symbol, digits)}"
        )


if __name__ == "__main__":  # pragma: no cover
    main()

"""Settlement presentation logic for the Streamlit UI.

Pure transformations from a ``LedgerSettlement`` to table rows and
Altair-ready chart data. Rounding happens here and nowhere earlier.
"""

from src.application.use_cases.get_ledger_settlement import LedgerSettlement
from src.domain.constants import DEFAULT_CURRENCY_SYMBOL, DEFAULT_DISPLAY_DIGITS
from src.domain.services.formatting import (
    describe_balance,
    format_amount,
    round_amount,
)

RECEIVABLE = "Receivable"
PAYABLE = "Payable"
SETTLED = "Settled"


def balance_rows(
    settlement: LedgerSettlement,
    symbol: str = DEFAULT_CURRENCY_SYMBOL,
    digits: int = DEFAULT_DISPLAY_DIGITS,
) -> list[dict[str, str]]:
    """Return one table row per person, in balance order."""
    return [
        {
            "Person": balance.person.name,
            "Balance": format_amount(balance.amount, symbol, digits),
            "Status": describe_balance(balance, symbol, digits),
        }
        for balance in settlement.balances
    ]


def transfer_rows(
    settlement: LedgerSettlement,
    symbol: str = DEFAULT_CURRENCY_SYMBOL,
    digits: int = DEFAULT_DISPLAY_DIGITS,
) -> list[dict[str, str]]:
    """Return one table row per planned transfer."""
    return [
        {
            "From": transfer.from_person.name,
            "To": transfer.to_person.name,
            "Amount": format_amount(transfer.amount, symbol, digits),
        }
        for transfer in settlement.transfers
    ]


def balance_chart_data(
    settlement: LedgerSettlement,
    symbol: str = DEFAULT_CURRENCY_SYMBOL,
    digits: int = DEFAULT_DISPLAY_DIGITS,
) -> list[dict[str, str | float]]:
    """Return bar chart data with one signed bar per person.

    Args:
        settlement: Computed settlement to display.
        symbol: Currency symbol used in labels.
        digits: Maximum fraction digits used in labels.

    Returns:
        list[dict[str, str | float]]: Rows with person, amount, label, side.
    """
    data: list[dict[str, str | float]] = []
    for balance in settlement.balances:
        if balance.is_creditor:
            side = RECEIVABLE
        elif balance.is_debtor:
            side = PAYABLE
        else:
            side = SETTLED
        data.append(
            {
                "person": balance.person.name,
                "amount": float(round_amount(balance.amount, digits)),
                "amount_label": format_amount(balance.amount, symbol, digits),
                "side": side,
            }
        )
    return data


__all__ = [
    "RECEIVABLE",
    "PAYABLE",
    "SETTLED",
    "balance_rows",
    "transfer_rows",
    "balance_chart_data",
]

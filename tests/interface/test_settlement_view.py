"""Tests for the settlement presentation helpers."""

from decimal import Decimal

from src.adapters.interface.streamlit.settlement_view import (
    PAYABLE,
    RECEIVABLE,
    SETTLED,
    balance_chart_data,
    balance_rows,
    transfer_rows,
)
from src.application.use_cases.get_ledger_settlement import settle_ledger
from src.domain.models import Expense, Ledger, Person


ALICE = Person(id="a", name="Alice")
BOB = Person(id="b", name="Bob")
CAROL = Person(id="c", name="Carol")
DAVE = Person(id="d", name="Dave")


def _settlement():
    ledger = Ledger(
        id="l1",
        title="Trip",
        participants=(ALICE, BOB, CAROL, DAVE),
        expenses=(
            Expense("e1", "Dinner", Decimal("100"), ALICE, (ALICE, BOB, CAROL)),
        ),
    )
    return settle_ledger(ledger)


def test_balance_rows_round_only_for_display() -> None:
    rows = balance_rows(_settlement())

    assert rows == [
        {
            "Person": "Alice",
            "Balance": "¥66.67",
            "Status": "Receivable: ¥66.67",
        },
        {"Person": "Bob", "Balance": "-¥33.33", "Status": "Payable: ¥33.33"},
        {"Person": "Carol", "Balance": "-¥33.33", "Status": "Payable: ¥33.33"},
        {"Person": "Dave", "Balance": "¥0", "Status": "Settled"},
    ]


def test_transfer_rows_use_settings() -> None:
    rows = transfer_rows(_settlement(), symbol="$", digits=1)

    assert rows == [
        {"From": "Bob", "To": "Alice", "Amount": "$33.3"},
        {"From": "Carol", "To": "Alice", "Amount": "$33.3"},
    ]


def test_balance_chart_data_marks_each_side() -> None:
    data = balance_chart_data(_settlement())

    assert [row["side"] for row in data] == [
        RECEIVABLE,
        PAYABLE,
        PAYABLE,
        SETTLED,
    ]
    assert data[0]["amount"] == 66.67
    assert data[1]["amount_label"] == "-¥33.33"


def test_chart_bar_and_label_round_the_same_way() -> None:
    """Half cents round up on both the bar and its label."""
    ledger = Ledger(
        id="l2",
        title="Coffee",
        participants=(ALICE, BOB),
        expenses=(
            Expense("e1", "Coffee", Decimal("0.25"), ALICE, (ALICE, BOB)),
        ),
    )

    data = balance_chart_data(settle_ledger(ledger))

    assert data[0]["amount"] == 0.13
    assert data[0]["amount_label"] == "¥0.13"
    assert data[1]["amount"] == -0.13
    assert data[1]["amount_label"] == "-¥0.13"

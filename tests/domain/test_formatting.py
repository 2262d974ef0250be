"""Tests for display formatting of amounts and balances."""

from decimal import Decimal

import pytest

from src.domain.models import Balance, Person
from src.domain.services.formatting import (
    describe_balance,
    format_amount,
    round_amount,
)


@pytest.mark.parametrize(
    ("amount", "expected"),
    [
        (Decimal("30"), "¥30"),
        (Decimal("12.50"), "¥12.5"),
        (Decimal("1234.567"), "¥1,234.57"),
        (Decimal("-33.333333333333"), "-¥33.33"),
        (Decimal("0.004"), "¥0"),
        (Decimal("-0.004"), "¥0"),
        (Decimal("0.005"), "¥0.01"),
    ],
)
def test_format_amount_default_display(amount, expected) -> None:
    assert format_amount(amount) == expected


def test_format_amount_custom_symbol_and_digits() -> None:
    assert format_amount(Decimal("9.99"), symbol="€", max_digits=0) == "€10"
    assert format_amount(Decimal("1.23456"), "$", 3) == "$1.235"


def test_describe_balance() -> None:
    alice = Person(id="a", name="Alice")

    assert describe_balance(Balance(alice, Decimal("60"))) == "Receivable: ¥60"
    assert describe_balance(Balance(alice, Decimal("-12.5"))) == "Payable: ¥12.5"
    assert describe_balance(Balance(alice, Decimal("0.00001"))) == "Settled"


def test_round_amount_rounds_half_up_without_negative_zero() -> None:
    assert round_amount(Decimal("0.125")) == Decimal("0.13")
    assert round_amount(Decimal("-0.125")) == Decimal("-0.13")
    assert str(round_amount(Decimal("-0.001"))) == "0.00"
    assert round_amount(Decimal("2.5"), 0) == Decimal("3")

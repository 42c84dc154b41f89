"""Tests for Decimal money helpers"""
import pytest
from decimal import Decimal

from core.services.money import to_decimal, round_money, format_money, to_float, add, multiply


@pytest.mark.parametrize("value,expected", [
    (None, Decimal("0")),
    ("19.99", Decimal("19.99")),
    (19.99, Decimal("19.99")),
    (3, Decimal("3")),
    ("garbage", Decimal("0")),
])
def test_to_decimal(value, expected):
    assert to_decimal(value) == expected


def test_float_goes_through_str():
    # Decimal(0.1) would carry the binary expansion
    assert to_decimal(0.1) == Decimal("0.1")


def test_round_money_half_up():
    assert round_money(Decimal("7.999")) == Decimal("8.00")
    assert round_money(Decimal("0.005")) == Decimal("0.01")
    assert round_money(Decimal("87.989")) == Decimal("87.99")


def test_format_money():
    assert format_money(Decimal("109.98")) == "$109.98"
    assert format_money(Decimal("10.998")) == "$11.00"
    assert format_money(5) == "$5.00"
    assert format_money(Decimal("0.005")) == "$0.01"


def test_arithmetic():
    assert add("0.1", "0.2") == Decimal("0.3")
    assert multiply("79.99", 3) == Decimal("239.97")
    assert to_float(Decimal("79.99")) == 79.99

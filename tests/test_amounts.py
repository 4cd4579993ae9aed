"""Tests for amount formatting."""

from decimal import Decimal

from stripeledger.utils.amounts import format_amount, to_major_units


def test_to_major_units_two_decimals():
    assert to_major_units(1050, "usd") == Decimal("10.50")
    assert to_major_units(-5, "EUR") == Decimal("-0.05")


def test_to_major_units_zero_decimal_currency():
    assert to_major_units(1500, "jpy") == Decimal("1500")


def test_format_amount():
    assert format_amount(123456, "usd") == "1,234.56 USD"
    assert format_amount(-5000, "usd") == "-50.00 USD"
    assert format_amount(1500, "jpy") == "1,500 JPY"

"""Tests for amount parsing."""

from decimal import Decimal

import pytest

from fleetledger.utils.amount_parser import parse_amount


@pytest.mark.parametrize(
    "text,expected",
    [
        ("123.45", Decimal("123.45")),
        ("1,250.00", Decimal("1250.00")),
        ("AED 300", Decimal("300")),
        ("300 aed", Decimal("300")),
        ("$45.10", Decimal("45.10")),
        ("-5", Decimal("-5")),
        ("0", Decimal("0")),
    ],
)
def test_parse_amount(text, expected):
    assert parse_amount(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "abc", "12.3.4", "inf"])
def test_parse_amount_invalid(text):
    with pytest.raises(ValueError):
        parse_amount(text)

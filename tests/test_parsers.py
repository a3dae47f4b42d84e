"""Tests for date and amount parsers."""

from datetime import date
from decimal import Decimal

import pytest

from bookkeeper.utils import parse_amount, parse_iso_date


def test_parse_iso_date():
    """Test parsing a calendar date."""
    assert parse_iso_date("2024-01-15") == date(2024, 1, 15)
    assert parse_iso_date(" 2024-02-29 ") == date(2024, 2, 29)


@pytest.mark.parametrize(
    "value",
    ["2024-1-15", "20240115", "2024-13-01", "2023-02-29", "2024-01-15T10:00:00", "today", "", None, 20240115],
)
def test_parse_iso_date_rejects(value):
    """Test that anything but strict YYYY-MM-DD is rejected."""
    with pytest.raises(ValueError):
        parse_iso_date(value)


def test_parse_amount_numbers():
    """Test JSON numbers."""
    assert parse_amount(10) == Decimal("10")
    assert parse_amount(10.1) == Decimal("10.1")
    assert parse_amount(Decimal("3.50")) == Decimal("3.50")


def test_parse_amount_strings():
    """Test plain numeric strings."""
    assert parse_amount("123.45") == Decimal("123.45")
    assert parse_amount(" 12.00 ") == Decimal("12.00")
    assert parse_amount("-7") == Decimal("-7")


@pytest.mark.parametrize("value", ["$5", "1,000", "(12.00)", "12 EUR", "1_000"])
def test_parse_amount_rejects_decorated_strings(value):
    """Test that currency symbols, separators and parentheses are not amounts."""
    with pytest.raises(ValueError):
        parse_amount(value)


@pytest.mark.parametrize("value", [True, None, "", "abc", "Infinity", "NaN", [1], float("inf")])
def test_parse_amount_rejects(value):
    """Test that non-numbers and non-finite values are rejected."""
    with pytest.raises(ValueError):
        parse_amount(value)

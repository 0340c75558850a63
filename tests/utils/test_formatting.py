"""
Tests for currency and name formatting helpers.
"""
from decimal import Decimal

import pytest

from rm_dashboard.utils.formatting import (
    format_crore,
    format_currency,
    get_initials,
    round_half_up,
    round_to_int,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (37_500_000, "₹3.8 Cr"),
        (10_000_000, "₹1.0 Cr"),
        (250_000, "₹2.5 L"),
        (100_000, "₹1.0 L"),
        (25_000, "₹25.0 K"),
        (1_000, "₹1.0 K"),
        (500, "₹500"),
        (500.0, "₹500"),
        (12.5, "₹12.5"),
        (0, "₹0"),
    ],
)
def test_format_currency(value, expected):
    assert format_currency(value) == expected


def test_format_crore():
    assert format_crore(3_750_000) == "₹0.4Cr"
    assert format_crore(125_000_000) == "₹12.5Cr"
    assert format_crore(0) == "₹0.0Cr"


def test_round_half_up():
    assert round_half_up(2.5) == Decimal("3")
    assert round_half_up(3.5) == Decimal("4")
    assert round_half_up(0.25, 1) == Decimal("0.3")
    assert round_to_int(1462.0000000000005) == 1462
    assert round_to_int(408.5) == 409


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Rahul Sharma", "RS"),
        ("priya patel", "PP"),
        ("Amit Kumar Singh", "AK"),
        ("Neha", "N"),
        ("", ""),
    ],
)
def test_get_initials(name, expected):
    assert get_initials(name) == expected

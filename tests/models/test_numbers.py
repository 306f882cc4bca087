# tests/models/test_numbers.py
"""Tests for number formatting helpers."""

import pytest

from models.numbers import format_amount, format_compact, plain_number


@pytest.mark.parametrize("value,expected", [(8, "8"), (8.0, "8"), (12.5, "12.5"), (0, "0")])
def test_plain_number(value, expected):
    assert plain_number(value) == expected


@pytest.mark.parametrize(
    "value,expected",
    [(999, "999"), (1500, "1.5K"), (2_500_000, "2.5M"), (3_200_000_000, "3.2B")],
)
def test_format_compact(value, expected):
    assert format_compact(value) == expected


@pytest.mark.parametrize(
    "value,expected",
    [(5000, "5,000"), (1_250_000.0, "1,250,000"), (15000.5, "15,000.5"), (0.25, "0.25")],
)
def test_format_amount(value, expected):
    assert format_amount(value) == expected

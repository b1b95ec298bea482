"""Tests for the numeric literal parser."""

from decimal import Decimal

import pytest

from formguard import is_numeric, parse_number


class TestParseNumber:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("5", Decimal(5)),
            ("-3.5", Decimal("-3.5")),
            (" +42 ", Decimal(42)),
            (".5", Decimal("0.5")),
            ("5.", Decimal(5)),
            ("1e3", Decimal(1000)),
            ("1E-2", Decimal("0.01")),
            ("007", Decimal(7)),
            (12, Decimal(12)),
            (2.5, Decimal("2.5")),
            (0.1, Decimal("0.1")),
            (Decimal("9.99"), Decimal("9.99")),
        ],
    )
    def test_numeric(self, value, expected):
        assert parse_number(value) == expected

    @pytest.mark.parametrize(
        "value",
        [
            "",
            " ",
            "abc",
            "1.2.3",
            "0x1A",
            "1_000",
            "1,000",
            "inf",
            "nan",
            "--1",
            "e5",
            ".",
            "5e",
            True,
            False,
            None,
            float("nan"),
            float("inf"),
            [1],
        ],
    )
    def test_not_numeric(self, value):
        assert parse_number(value) is None
        assert is_numeric(value) is False

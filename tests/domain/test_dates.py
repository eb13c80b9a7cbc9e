"""Tests for DD/MM/YYYY date parsing and the canonicalization check."""

from __future__ import annotations

from datetime import date
from typing import Any

import pytest

from albumctl.domain.dates import parse_localized_date


class TestParseLocalizedDate:
    def test_valid_date(self) -> None:
        parsed = parse_localized_date("25/12/2020")
        assert isinstance(parsed, date)
        assert parsed.year == 2020
        assert parsed.month == 12
        assert parsed.day == 25

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1/1/2000", date(2000, 1, 1)),
            ("01/01/2000", date(2000, 1, 1)),
            ("9/09/1969", date(1969, 9, 9)),
            ("31/12/9999", date(9999, 12, 31)),
            ("30/04/2021", date(2021, 4, 30)),
        ],
    )
    def test_optional_zero_padding(self, text: str, expected: date) -> None:
        assert parse_localized_date(text) == expected

    @pytest.mark.parametrize("text", ["31/02/2020", "30/02/2020", "31/04/2021", "31/06/2021"])
    def test_day_past_end_of_month(self, text: str) -> None:
        assert parse_localized_date(text) is None

    def test_leap_year(self) -> None:
        assert parse_localized_date("29/02/2020") == date(2020, 2, 29)

    def test_non_leap_year(self) -> None:
        assert parse_localized_date("29/02/2019") is None

    def test_century_leap_rules(self) -> None:
        assert parse_localized_date("29/02/2000") is not None
        assert parse_localized_date("29/02/1900") is None

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "abcd",
            "2020-12-25",
            "12/25/2020",
            "99/99/9999",
            "00/01/2020",
            "01/00/2020",
            "32/01/2020",
            "01/13/2020",
            "1/1/20",
            "1/1/20201",
            "001/01/2020",
            " 25/12/2020",
            "25/12/2020 ",
            "25/12/2020\n",
            "25-12-2020",
        ],
    )
    def test_pattern_mismatch(self, text: str) -> None:
        assert parse_localized_date(text) is None

    def test_year_zero(self) -> None:
        assert parse_localized_date("01/01/0000") is None

    def test_non_ascii_digits(self) -> None:
        assert parse_localized_date("٢٥/12/2020") is None

    @pytest.mark.parametrize("value", [None, 20201225, date(2020, 12, 25)])
    def test_non_text(self, value: Any) -> None:
        assert parse_localized_date(value) is None

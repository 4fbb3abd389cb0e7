# tests/test_validators.py
"""
Validator Tests - Unit Tests for Argument Validation and Date Ranges

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- nbprate.shared.validators (parse_arguments, parse_iso_date, validate_currency_code)
- nbprate.shared.date_range (iter_days)
"""
from datetime import date

import pytest

from nbprate.domain.errors import ArgumentError
from nbprate.shared.date_range import iter_days
from nbprate.shared.validators import parse_arguments, parse_iso_date, validate_currency_code


class TestValidateCurrencyCode:
    @pytest.mark.parametrize("code", ["USD", "eur", " CHF "])
    def test_valid(self, code):
        assert validate_currency_code(code)

    @pytest.mark.parametrize("code", ["", "US", "USDX", "U$D", "123"])
    def test_invalid(self, code):
        assert not validate_currency_code(code)


class TestParseIsoDate:
    def test_valid(self):
        assert parse_iso_date("2013-01-28") == date(2013, 1, 28)

    @pytest.mark.parametrize("text", ["2013/01/28", "28-01-2013", "2013-1-28", "", "2013-02-30"])
    def test_invalid(self, text):
        with pytest.raises(ArgumentError):
            parse_iso_date(text)


class TestParseArguments:
    def test_valid(self):
        assert parse_arguments(["eur", "2013-01-28", "2013-01-31"]) == (
            "EUR", date(2013, 1, 28), date(2013, 1, 31),
        )

    def test_extra_arguments_ignored(self):
        code, _, _ = parse_arguments(["USD", "2013-01-28", "2013-01-31", "--verbose"])
        assert code == "USD"

    @pytest.mark.parametrize("args", [[], ["USD"], ["USD", "2013-01-28"]])
    def test_too_few(self, args):
        with pytest.raises(ArgumentError, match="Too few arguments"):
            parse_arguments(args)

    def test_bad_code(self):
        with pytest.raises(ArgumentError, match="currency code"):
            parse_arguments(["DOLLAR", "2013-01-28", "2013-01-31"])

    def test_reversed_range(self):
        with pytest.raises(ArgumentError, match="after end date"):
            parse_arguments(["USD", "2013-01-31", "2013-01-28"])


class TestIterDays:
    def test_inclusive_ascending(self):
        days = list(iter_days(date(2023, 12, 30), date(2024, 1, 2)))
        assert days == [date(2023, 12, 30), date(2023, 12, 31), date(2024, 1, 1), date(2024, 1, 2)]

    def test_single_day(self):
        assert list(iter_days(date(2024, 2, 29), date(2024, 2, 29))) == [date(2024, 2, 29)]

    def test_reversed(self):
        with pytest.raises(ValueError):
            list(iter_days(date(2024, 1, 2), date(2024, 1, 1)))

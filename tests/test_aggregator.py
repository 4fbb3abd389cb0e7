# tests/test_aggregator.py
"""
Aggregator Tests - Unit Tests for Truncated Means and Deviation

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- nbprate.application.aggregator (truncated_mean, population_std_dev, summarize)
- nbprate.domain.models (RateRecord for test data)
"""
from decimal import Decimal

import pytest

from nbprate.application.aggregator import population_std_dev, summarize, truncate, truncated_mean
from nbprate.domain.errors import EmptyResultError
from nbprate.domain.models import RateRecord


def record(buy, sell, code="USD"):
    return RateRecord(
        currency_name="dolar amerykański",
        currency_code=code,
        multiplier=1,
        buying_price=Decimal(buy),
        selling_price=Decimal(sell),
    )


class TestTruncatedMean:
    def test_two_values(self):
        assert truncated_mean([Decimal("3.9112"), Decimal("3.9050")]) == Decimal("3.9081")

    def test_division_truncates_instead_of_rounding(self):
        # 12.70 / 3 = 4.23333..., 2.0000 / 3 = 0.66666...
        assert truncated_mean([Decimal("4.00"), Decimal("4.50"), Decimal("4.20")]) == Decimal("4.2333")
        assert truncated_mean([Decimal("1"), Decimal("1"), Decimal("0")]) == Decimal("0.6666")

    def test_inputs_beyond_four_places(self):
        assert truncated_mean([Decimal("0.50009"), Decimal("0.5")]) == Decimal("0.5000")

    def test_result_has_four_places(self):
        mean = truncated_mean([Decimal("4"), Decimal("4")])
        assert str(mean) == "4.0000"

    def test_empty(self):
        with pytest.raises(EmptyResultError):
            truncated_mean([])

    def test_truncate(self):
        assert truncate(Decimal("3.99999")) == Decimal("3.9999")


class TestPopulationStdDev:
    def test_against_truncated_mean(self):
        values = [Decimal("4.00"), Decimal("4.50"), Decimal("4.20")]
        result = population_std_dev(values, Decimal("4.2333"))
        assert f"{result:.4f}" == "0.2055"

    def test_divides_by_count(self):
        assert population_std_dev([Decimal("1"), Decimal("3")], Decimal("2")) == pytest.approx(1.0)

    def test_single_value(self):
        assert population_std_dev([Decimal("4.1")], Decimal("4.1")) == 0.0

    def test_empty(self):
        with pytest.raises(EmptyResultError):
            population_std_dev([], Decimal("0"))


class TestSummarize:
    def test_summary(self):
        summary = summarize([
            record("3.9112", "4.00"),
            record("3.9050", "4.50"),
            record("3.9081", "4.20"),
        ])
        assert summary.count == 3
        assert summary.mean_buying_price == Decimal("3.9081")
        assert summary.mean_selling_price == Decimal("4.2333")
        assert summary.selling_std_dev == pytest.approx(0.20548, abs=1e-5)

    def test_empty_records(self):
        with pytest.raises(EmptyResultError, match="No rates"):
            summarize([])

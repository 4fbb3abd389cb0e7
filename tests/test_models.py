# tests/test_models.py
"""Domain model tests: currency lookup and immutability."""
import dataclasses
from datetime import date
from decimal import Decimal

import pytest

from nbprate.domain.errors import CurrencyNotFoundError
from nbprate.domain.models import RateRecord, RateTable


@pytest.fixture
def table():
    return RateTable(
        table_id="051/C/NBP/2023",
        table_type="C",
        listing_date=date(2023, 3, 14),
        publishing_date=date(2023, 3, 15),
        positions=(
            RateRecord("dolar amerykański", "USD", 1, Decimal("4.3512"), Decimal("4.4390")),
            RateRecord("euro", "EUR", 1, Decimal("4.6311"), Decimal("4.7247")),
            RateRecord("duplicate", "USD", 1, Decimal("0"), Decimal("0")),
        ),
    )


class TestGetTablePosition:
    def test_first_match(self, table):
        assert table.get_table_position("USD").currency_name == "dolar amerykański"
        assert table.get_table_position("EUR").buying_price == Decimal("4.6311")

    def test_exact_match_only(self, table):
        with pytest.raises(CurrencyNotFoundError, match="usd"):
            table.get_table_position("usd")

    def test_missing_code(self, table):
        with pytest.raises(LookupError):
            table.get_table_position("CHF")


def test_records_are_frozen(table):
    with pytest.raises(dataclasses.FrozenInstanceError):
        table.positions[0].buying_price = Decimal("1")
    with pytest.raises(dataclasses.FrozenInstanceError):
        table.table_id = "x"

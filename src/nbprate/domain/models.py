# src/nbprate/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains domain models representing core business concepts:
- Single currency quotes (table positions)
- Daily currency tables
- Aggregated statistics and run reports

Files that USE this module:
- nbprate.adapters.nbp.decoding (builds RateTable/RateRecord from markup)
- nbprate.application.* (aggregator and rates service consume the models)
- nbprate.adapters.formatting.formatter (renders RateSummary)
- tests.* (tests use domain models for test data)

Files that this module USES:
- nbprate.domain.errors (CurrencyNotFoundError)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes
from datetime import date  # Calendar dates for listing/publishing days
from decimal import Decimal  # Exact arithmetic for money values

from nbprate.domain.errors import CurrencyNotFoundError


@dataclass(frozen=True)
class RateRecord:
    """
    One currency's quote within a table (a "pozycja" entry).

    Attributes:
        currency_name: Currency name as published (Polish)
        currency_code: ISO 4217 code, unique within a table
        multiplier: Number of currency units the prices refer to
        buying_price: Bank buying price in PLN
        selling_price: Bank selling price in PLN
    """
    currency_name: str
    currency_code: str
    multiplier: int
    buying_price: Decimal
    selling_price: Decimal


@dataclass(frozen=True)
class RateTable:
    """
    One daily publication of currency quotes.

    Attributes:
        table_id: Table number, e.g. "73/C/NBP/2007"
        table_type: Table classification taken from the markup attribute
        listing_date: Day the rates were quoted
        publishing_date: Day the table was released
        positions: Records in source order
    """
    table_id: str
    table_type: str
    listing_date: date
    publishing_date: date
    positions: tuple[RateRecord, ...] = ()

    def get_table_position(self, currency_code: str) -> RateRecord:
        """
        Return the first record whose code equals ``currency_code``.

        Raises:
            CurrencyNotFoundError: If no record carries that code
        """
        for position in self.positions:
            if position.currency_code == currency_code:
                return position
        raise CurrencyNotFoundError(f"Currency code not found: {currency_code}")


@dataclass(frozen=True)
class RateSummary:
    """
    Statistics computed over the collected records.

    Attributes:
        count: Number of records aggregated
        mean_buying_price: Truncated mean of buying prices (4 places)
        mean_selling_price: Truncated mean of selling prices (4 places)
        selling_std_dev: Population standard deviation of selling prices
    """
    count: int
    mean_buying_price: Decimal
    mean_selling_price: Decimal
    selling_std_dev: float


@dataclass(frozen=True)
class RunReport:
    """Outcome of iterating one date range for one currency."""
    currency_code: str
    start: date
    end: date
    records: tuple[RateRecord, ...]
    skipped_dates: tuple[date, ...]

# src/nbprate/application/rates_service.py
"""
Rates Service - Date Range Iteration and Aggregation

This module drives one run: every calendar day in the range is resolved to
an NBP table, the requested currency is picked out, and the collected quotes
are aggregated. Missing tables are expected (weekends, holidays), so any
per-date failure is logged and the day is skipped.

Files that USE this module:
- nbprate.app (RatesService.summarize)
- tests.test_rates_service (unit tests)

Files that this module USES:
- nbprate.adapters.nbp.downloader (TableDownloader protocol)
- nbprate.application.aggregator (summarize)
- nbprate.shared.date_range (iter_days)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging
from datetime import date
from typing import List, Protocol

from nbprate.application.aggregator import summarize
from nbprate.domain.errors import (
    CurrencyNotFoundError,
    EmptyResultError,
    NbpError,
    TableNotFoundError,
)
from nbprate.domain.models import RateRecord, RateSummary, RateTable, RunReport
from nbprate.shared.date_range import iter_days

log = logging.getLogger(__name__)


class TableSource(Protocol):
    """Protocol for anything that returns the table published on a date."""
    def download_table(self, publishing_date: date) -> RateTable:
        ...


class RatesService:
    """Collects one currency's quotes across a date range and summarizes them."""

    def __init__(self, source: TableSource):
        """
        Args:
            source: Table source (typically a TableDownloader)
        """
        self.source = source

    def collect(self, currency_code: str, start: date, end: date) -> RunReport:
        """
        Fetch the quote for every day in ``[start, end]``.

        Days without a usable table are skipped, never retried.
        """
        records: List[RateRecord] = []
        skipped: List[date] = []

        for day in iter_days(start, end):
            try:
                table = self.source.download_table(day)
                log.info("Received table %s published %s", table.table_id, table.publishing_date)
                log.debug("Received table: %s", table)
                records.append(table.get_table_position(currency_code))
            except (TableNotFoundError, CurrencyNotFoundError) as e:
                log.error("No rate for %s on %s: %s", currency_code, day, e)
                skipped.append(day)
            except NbpError as e:
                log.error("Error while downloading currency table for %s: %s", day, e)
                skipped.append(day)

        log.info(
            "Collected %d rate(s) for %s between %s and %s, skipped %d day(s)",
            len(records), currency_code, start, end, len(skipped),
        )
        return RunReport(
            currency_code=currency_code,
            start=start,
            end=end,
            records=tuple(records),
            skipped_dates=tuple(skipped),
        )

    def summarize(self, currency_code: str, start: date, end: date) -> RateSummary:
        """
        Collect and aggregate.

        Raises:
            EmptyResultError: If no day in the range produced a rate
        """
        report = self.collect(currency_code, start, end)
        if not report.records:
            raise EmptyResultError(
                f"No {currency_code} rates found between {start} and {end}"
            )
        return summarize(report.records)

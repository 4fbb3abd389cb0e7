# src/nbprate/adapters/nbp/downloader.py
"""
NBP Table Downloader - Locate and Fetch in One Call

Files that USE this module:
- nbprate.application.rates_service (download_table per date)
- nbprate.app (built from settings)

Files that this module USES:
- nbprate.adapters.nbp.locator (TableLocator)
- nbprate.adapters.nbp.fetcher (TableFetcher)
"""
from __future__ import annotations

from datetime import date
from typing import Callable, Optional

from nbprate.adapters.nbp.fetcher import TableFetcher
from nbprate.adapters.nbp.locator import TableLocator
from nbprate.config.settings import Settings
from nbprate.domain.models import RateTable


class TableDownloader:
    """Downloads the currency table published on a given date."""

    def __init__(self, locator: TableLocator, fetcher: TableFetcher):
        self.locator = locator
        self.fetcher = fetcher

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        today: Optional[Callable[[], date]] = None,
    ) -> "TableDownloader":
        fetcher = TableFetcher.from_settings(settings)
        locator = TableLocator(fetcher, table_type=settings.table_type, today=today)
        return cls(locator, fetcher)

    def download_table(self, publishing_date: date) -> RateTable:
        """
        Return the table published on ``publishing_date``.

        Raises:
            TableNotFoundError: No table listed for that date
            TableFetchError: Network failure or timeout
            TableDecodeError: Malformed index or table
        """
        stem = self.locator.locate(publishing_date)
        return self.fetcher.fetch_table(stem)

    def close(self) -> None:
        self.fetcher.close()

    def __enter__(self) -> "TableDownloader":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

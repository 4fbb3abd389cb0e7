# src/nbprate/adapters/nbp/locator.py
"""
NBP Table Locator - Resolving a Date to a Table Filename

NBP keeps one index file for the current year (dir.txt) and one per past
year (dir2019.txt, ...). Each line is a table filename stem such as
"c073z070413": type tag, table number, "z", publishing date as yyMMdd.

Files that USE this module:
- nbprate.adapters.nbp.downloader (locate before fetching a table)
- tests.test_locator (unit tests)

Files that this module USES:
- nbprate.adapters.nbp.fetcher (TableFetcher.fetch_index)
- nbprate.domain.errors (TableNotFoundError)
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Iterable, List, Optional, Protocol

from nbprate.config.settings import DEFAULT_TABLE_TYPE
from nbprate.domain.errors import TableNotFoundError

log = logging.getLogger(__name__)

CURRENT_INDEX_NAME = "dir.txt"
PAST_INDEX_PREFIX = "dir"
PAST_INDEX_EXT = ".txt"


class IndexSource(Protocol):
    """Anything that can return the lines of a named index file."""
    def fetch_index(self, name: str) -> List[str]:
        ...


def format_publishing_date(d: date) -> str:
    """Encode a date the way index lines carry it (yyMMdd)."""
    return d.strftime("%y%m%d")


class TableLocator:
    """Finds the table filename stem published on a given date."""

    def __init__(
        self,
        index_source: IndexSource,
        table_type: str = DEFAULT_TABLE_TYPE,
        today: Optional[Callable[[], date]] = None,
    ):
        """
        Args:
            index_source: Provides index file lines (normally a TableFetcher)
            table_type: Type tag the line must start with
            today: Clock used to tell current-year dates apart (default date.today)
        """
        self.index_source = index_source
        self.table_type = table_type
        self.today = today or date.today

    def index_name_for(self, d: date) -> str:
        """Return the index file that lists tables for ``d``."""
        # evaluated per call so a long run crossing New Year picks the right file
        if d.year == self.today().year:
            return CURRENT_INDEX_NAME
        return f"{PAST_INDEX_PREFIX}{d.year}{PAST_INDEX_EXT}"

    def find_table_name(self, lines: Iterable[str], d: date) -> str:
        """
        Return the first line with the configured type tag that mentions ``d``.

        Raises:
            TableNotFoundError: If no line matches
        """
        encoded = format_publishing_date(d)
        for line in lines:
            if line.startswith(self.table_type) and encoded in line:
                return line
        raise TableNotFoundError(f"Currency table {encoded} not found!")

    def locate(self, d: date) -> str:
        """
        Fetch the right index and resolve the table filename stem for ``d``.

        Raises:
            TableFetchError, TableDecodeError: If the index cannot be read
            TableNotFoundError: If the index lists no table for ``d``
        """
        index_name = self.index_name_for(d)
        stem = self.find_table_name(self.index_source.fetch_index(index_name), d)
        log.debug("Resolved %s to %s via %s", d, stem, index_name)
        return stem

# src/nbprate/adapters/nbp/fetcher.py
"""
NBP Table Fetcher - HTTP Retrieval of Index Files and Currency Tables

This module downloads resources from the NBP remote folder
(http://www.nbp.pl/kursy/xml/ by default) with separate connect and read
timeouts, and hands the bytes to the decoders. One attempt per resource;
failures are raised to the caller.

Files that USE this module:
- nbprate.adapters.nbp.locator (fetch_index to read the yearly index)
- nbprate.adapters.nbp.downloader (fetch_table)
- tests.test_fetcher (unit tests)

Files that this module USES:
- nbprate.adapters.nbp.decoding (TableDecoder, decode_index_lines)
- nbprate.domain.errors (TableFetchError)
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import requests

from nbprate.adapters.nbp.decoding import TableDecoder, decode_index_lines
from nbprate.config.settings import DEFAULT_BASE_URL, Settings
from nbprate.domain.errors import TableFetchError
from nbprate.domain.models import RateTable

log = logging.getLogger(__name__)

TABLE_EXTENSION = ".xml"
DEFAULT_TIMEOUT: Tuple[Optional[float], Optional[float]] = (1.0, 1.0)  # (connect, read) seconds


class TableFetcher:
    """
    Client for the NBP remote folder.

    Owns a requests.Session for the lifetime of a run; call close() when done.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[Tuple[Optional[float], Optional[float]]] = None,
        index_charset: str = "utf-8",
        decoder: Optional[TableDecoder] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the fetcher.

        Args:
            base_url: Remote folder URL (defaults to the public NBP folder)
            timeout: (connect, read) timeout in seconds, None disables a phase
            index_charset: Charset used to read index files
            decoder: Table markup decoder
            session: Optional preconfigured requests session
        """
        url = base_url or DEFAULT_BASE_URL
        self.base_url = url if url.endswith("/") else url + "/"
        self.timeout = timeout if timeout is not None else DEFAULT_TIMEOUT
        self.index_charset = index_charset
        self.decoder = decoder or TableDecoder()
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "TableFetcher":
        return cls(
            base_url=settings.base_url,
            timeout=settings.timeout,
            index_charset=settings.index_charset,
            **kwargs,
        )

    def url_for(self, name: str) -> str:
        return self.base_url + name

    def _get_bytes(self, name: str) -> bytes:
        """
        Download a resource body.

        The response is always closed, whatever happens while reading it.

        Raises:
            TableFetchError: On timeout, connection failure or HTTP error status
        """
        url = self.url_for(name)
        log.debug("GET %s (timeout=%s)", url, self.timeout)
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            log.warning("Timeout fetching %s: %s", url, e)
            raise TableFetchError(f"Timeout fetching {url}: {e}") from e
        except requests.exceptions.RequestException as e:
            log.warning("Request failed for %s: %s", url, e)
            raise TableFetchError(f"Request failed for {url}: {e}") from e

        try:
            resp.raise_for_status()
            return resp.content
        except requests.exceptions.RequestException as e:
            raise TableFetchError(f"Failed to read {url}: {e}") from e
        finally:
            resp.close()

    def fetch_index(self, name: str) -> List[str]:
        """
        Download an index file and return its lines.

        Raises:
            TableFetchError: On I/O failure
            TableDecodeError: If the file is not valid text in the configured charset
        """
        return decode_index_lines(self._get_bytes(name), self.index_charset)

    def fetch_table(self, stem: str) -> RateTable:
        """
        Download and decode ``<stem>.xml``.

        Raises:
            TableFetchError: On I/O failure
            TableDecodeError: On malformed or unexpected markup
        """
        return self.decoder.decode(self._get_bytes(stem + TABLE_EXTENSION))

    def close(self) -> None:
        self.session.close()

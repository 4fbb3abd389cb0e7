# src/nbprate/adapters/nbp/__init__.py
"""
NBP Adapters - Remote Folder Client

Index lookup, HTTP retrieval and markup decoding for NBP currency tables.
"""

from nbprate.adapters.nbp.decoding import TableDecoder, decode_index_lines, parse_comma_decimal
from nbprate.adapters.nbp.downloader import TableDownloader
from nbprate.adapters.nbp.fetcher import TableFetcher
from nbprate.adapters.nbp.locator import TableLocator

__all__ = [
    "TableDecoder",
    "decode_index_lines",
    "parse_comma_decimal",
    "TableDownloader",
    "TableFetcher",
    "TableLocator",
]

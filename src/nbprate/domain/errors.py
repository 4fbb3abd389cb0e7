# src/nbprate/domain/errors.py
"""
Domain Errors - Business Logic Exceptions

This module defines the exceptions raised while locating, fetching, decoding
and aggregating NBP currency tables. Per-date failures (fetch, decode, missing
table, missing currency) are recoverable: the caller skips that date. The
remaining errors end the run.
"""


class NbpError(Exception):
    """Base exception for nbprate errors."""
    pass


class ArgumentError(NbpError):
    """Raised when command-line input is missing or malformed."""
    pass


class InitializationError(NbpError):
    """Raised when configuration or the table decoder cannot be set up."""
    pass


class TableFetchError(NbpError):
    """Raised when a remote resource cannot be retrieved (network, timeout, HTTP status)."""
    pass


class TableDecodeError(NbpError):
    """Raised when a retrieved resource is malformed or has unexpected content."""
    pass


class TableNotFoundError(NbpError, LookupError):
    """Raised when the index file lists no table for the requested date."""
    pass


class CurrencyNotFoundError(NbpError, LookupError):
    """Raised when a currency code is absent from a fetched table."""
    pass


class EmptyResultError(NbpError):
    """Raised when no date in the requested range produced a rate."""
    pass

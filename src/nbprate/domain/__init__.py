# src/nbprate/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains domain models and the error taxonomy.
No dependencies on infrastructure or external systems.
"""

from nbprate.domain.models import (
    RateRecord,
    RateSummary,
    RateTable,
    RunReport,
)
from nbprate.domain.errors import (
    ArgumentError,
    CurrencyNotFoundError,
    EmptyResultError,
    InitializationError,
    NbpError,
    TableDecodeError,
    TableFetchError,
    TableNotFoundError,
)

__all__ = [
    "RateRecord",
    "RateTable",
    "RateSummary",
    "RunReport",
    "NbpError",
    "ArgumentError",
    "InitializationError",
    "TableFetchError",
    "TableDecodeError",
    "TableNotFoundError",
    "CurrencyNotFoundError",
    "EmptyResultError",
]

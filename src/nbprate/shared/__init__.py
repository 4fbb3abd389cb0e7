# src/nbprate/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Date ranges
- Logging configuration
"""

from nbprate.shared.validators import (
    USAGE,
    parse_arguments,
    parse_iso_date,
    validate_currency_code,
)
from nbprate.shared.date_range import iter_days

__all__ = [
    "USAGE",
    "parse_arguments",
    "parse_iso_date",
    "validate_currency_code",
    "iter_days",
]

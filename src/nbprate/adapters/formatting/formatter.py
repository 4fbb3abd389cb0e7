# src/nbprate/adapters/formatting/formatter.py
"""
Result Formatter - Text Output of Computed Statistics

Files that USE this module:
- nbprate.app (prints format_summary)
- tests.test_formatter (unit tests)

Files that this module USES:
- nbprate.domain.models (RateSummary)
"""
from __future__ import annotations

from decimal import Decimal
from typing import List

from nbprate.domain.models import RateSummary


def format_mean(value: Decimal) -> str:
    """Default Decimal text form, e.g. 3.9081."""
    return str(value)


def format_std_dev(value: float) -> str:
    """Exactly four digits after the point (pattern #0.0000)."""
    return f"{value:.4f}"


def summary_lines(summary: RateSummary) -> List[str]:
    """Mean buying price, then selling-price standard deviation."""
    return [
        format_mean(summary.mean_buying_price),
        format_std_dev(summary.selling_std_dev),
    ]


def format_summary(summary: RateSummary) -> str:
    return "\n".join(summary_lines(summary))

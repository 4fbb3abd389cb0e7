"""Helpers for walking closed date ranges."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterator


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day from ``start`` to ``end`` inclusive, ascending."""

    if start > end:
        raise ValueError("start date must not be after end date")

    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)

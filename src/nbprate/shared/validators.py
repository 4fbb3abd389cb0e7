# src/nbprate/shared/validators.py
"""
Input Validation Utilities - Command-line Argument Validation

This module validates the positional arguments of a run: the currency code
and the two ISO calendar dates bounding the range.

Files that USE this module:
- nbprate.app (parse_arguments for the command line)

Files that this module USES:
- nbprate.domain.errors (ArgumentError)
"""
import re
from datetime import date
from typing import Sequence, Tuple

from nbprate.domain.errors import ArgumentError

USAGE = "Usage: nbprate CURRENCY_CODE START_DATE END_DATE (dates as YYYY-MM-DD)"

_CURRENCY_RE = re.compile(r"^[A-Za-z]{3}$")
_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def validate_currency_code(code: str) -> bool:
    """
    Validate currency code format.

    Args:
        code: Currency code to validate

    Returns:
        True if the code is three ASCII letters, False otherwise
    """
    if not code:
        return False
    return bool(_CURRENCY_RE.match(code.strip()))


def parse_iso_date(value: str) -> date:
    """
    Parse a ``YYYY-MM-DD`` string.

    Raises:
        ArgumentError: If the text is not a valid calendar date
    """
    text = (value or "").strip()
    if not _ISO_DATE_RE.match(text):
        raise ArgumentError(f"Wrong date format: {value!r} (expected YYYY-MM-DD)")
    try:
        return date.fromisoformat(text)
    except ValueError as e:
        raise ArgumentError(f"Wrong date: {value!r} ({e})") from e


def parse_arguments(args: Sequence[str]) -> Tuple[str, date, date]:
    """
    Validate the three positional arguments.

    Args:
        args: Arguments without the program name

    Returns:
        (upper-cased currency code, start date, end date)

    Raises:
        ArgumentError: On a missing argument, bad code, bad date or reversed range
    """
    if len(args) < 3:
        raise ArgumentError(f"Too few arguments! {USAGE}")

    code, start_text, end_text = args[0], args[1], args[2]
    if not validate_currency_code(code):
        raise ArgumentError(f"Invalid currency code: {code!r}")

    start = parse_iso_date(start_text)
    end = parse_iso_date(end_text)
    if start > end:
        raise ArgumentError(f"Start date {start} is after end date {end}")
    return code.strip().upper(), start, end

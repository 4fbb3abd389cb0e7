# src/nbprate/app.py
"""
Application Entry Point - Command-line Run

This module serves as the composition root for nbprate. It validates the
arguments, wires settings, logging and the NBP downloader, runs the date
range and prints the two result lines.

  nbprate USD 2013-01-28 2013-01-31

Exit codes:
  0 success; 1 initialization failure or no rates in range; 2 usage error.

Files that USE this module:
- nbprate.__main__ (python -m nbprate)
- pyproject console script "nbprate"

Files that this module USES:
- nbprate.shared.logging_conf (setup_logging for logging configuration)
- nbprate.shared.validators (parse_arguments)
- nbprate.config (load_settings)
- nbprate.adapters.nbp.downloader (TableDownloader)
- nbprate.application.rates_service (RatesService)
- nbprate.adapters.formatting.formatter (format_summary)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library for logging messages and errors
import sys  # Command-line arguments and stdout
from typing import Optional, Sequence, TextIO

from nbprate.adapters.formatting.formatter import format_summary
from nbprate.adapters.nbp.downloader import TableDownloader
from nbprate.application.rates_service import RatesService
from nbprate.config import load_settings
from nbprate.domain.errors import ArgumentError, EmptyResultError, InitializationError
from nbprate.shared.logging_conf import setup_logging
from nbprate.shared.validators import parse_arguments

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None, out: Optional[TextIO] = None) -> int:
    """
    Run one query and print the results.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])
        out: Stream for the result lines (default: sys.stdout)

    Returns:
        Process exit code
    """
    args = list(sys.argv[1:] if argv is None else argv)
    out = out or sys.stdout

    try:
        settings = load_settings()
    except InitializationError as e:
        setup_logging(level=logging.INFO)
        logger.error("%s", e)
        return EXIT_FAILURE

    setup_logging(
        level=getattr(logging, settings.log_level),
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        log_to_console=settings.log_console,
    )

    try:
        currency_code, start, end = parse_arguments(args)
    except ArgumentError as e:
        logger.error("%s", e)
        return EXIT_USAGE

    logger.info(
        "Fetching %s rates from %s to %s (table type %r, base %s)",
        currency_code, start, end, settings.table_type, settings.base_url,
    )

    with TableDownloader.from_settings(settings) as downloader:
        service = RatesService(downloader)
        try:
            summary = service.summarize(currency_code, start, end)
        except EmptyResultError as e:
            logger.error("%s", e)
            return EXIT_FAILURE

    print(format_summary(summary), file=out)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

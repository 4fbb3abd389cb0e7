# src/nbprate/application/aggregator.py
"""
Aggregator - Statistics over Collected Currency Quotes

Money sums and means use Decimal with explicit truncation to 4 fractional
digits (ROUND_DOWN at every step). The standard deviation is a population
figure computed in float against the truncated mean.

Files that USE this module:
- nbprate.application.rates_service (summarize)
- tests.test_aggregator (unit tests)

Files that this module USES:
- nbprate.domain.models (RateRecord, RateSummary)
- nbprate.domain.errors (EmptyResultError)
"""
from __future__ import annotations

import math
from decimal import ROUND_DOWN, Decimal, localcontext
from typing import Sequence

from nbprate.domain.errors import EmptyResultError
from nbprate.domain.models import RateRecord, RateSummary

FOUR_PLACES = Decimal("0.0001")


def truncate(value: Decimal) -> Decimal:
    """Cut ``value`` to 4 fractional digits, rounding toward zero."""
    return value.quantize(FOUR_PLACES, rounding=ROUND_DOWN)


def truncated_mean(values: Sequence[Decimal]) -> Decimal:
    """
    Mean with truncation applied to the sum and to the quotient.

    [3.9112, 3.9050] -> 7.8162 / 2 -> 3.9081

    Raises:
        EmptyResultError: If ``values`` is empty
    """
    if not values:
        raise EmptyResultError("Cannot average an empty sequence")
    total = truncate(sum(values, Decimal(0)))
    with localcontext() as ctx:
        # quotient must not round up before it is cut to 4 places
        ctx.rounding = ROUND_DOWN
        quotient = total / Decimal(len(values))
    return truncate(quotient)


def population_std_dev(values: Sequence[Decimal], mean: Decimal) -> float:
    """
    Population standard deviation of ``values`` around ``mean``.

    Raises:
        EmptyResultError: If ``values`` is empty
    """
    if not values:
        raise EmptyResultError("Cannot compute deviation of an empty sequence")
    m = float(mean)
    squares = sum((float(v) - m) ** 2 for v in values)
    return math.sqrt(squares / len(values))


def summarize(records: Sequence[RateRecord]) -> RateSummary:
    """
    Reduce collected records to the reported statistics.

    Raises:
        EmptyResultError: If ``records`` is empty
    """
    if not records:
        raise EmptyResultError("No rates were collected for the requested range")

    mean_buying = truncated_mean([r.buying_price for r in records])
    selling = [r.selling_price for r in records]
    mean_selling = truncated_mean(selling)
    return RateSummary(
        count=len(records),
        mean_buying_price=mean_buying,
        mean_selling_price=mean_selling,
        selling_std_dev=population_std_dev(selling, mean_selling),
    )

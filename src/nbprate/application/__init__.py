# src/nbprate/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains the aggregation rules and the date-range driver.
No direct I/O dependencies - tables come through the TableSource protocol.
"""

from nbprate.application.aggregator import population_std_dev, summarize, truncated_mean
from nbprate.application.rates_service import RatesService

__all__ = [
    "RatesService",
    "summarize",
    "truncated_mean",
    "population_std_dev",
]

"""
NBPRate - NBP Exchange Rate Statistics

Fetches daily currency tables published by the National Bank of Poland,
extracts one currency's buy/sell quote across a date range and reports the
mean buying price together with the standard deviation of the selling price.
"""

__version__ = "1.0.0"

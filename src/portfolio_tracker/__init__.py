"""Portfolio Tracker: holdings aggregation and valuation over a local transaction log."""

__version__ = "0.1.0"

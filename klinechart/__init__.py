"""Candlestick and volume chart geometry, market data records and events, and backtesting interfaces."""

__version__ = "0.1.0"

__all__ = ["__version__"]
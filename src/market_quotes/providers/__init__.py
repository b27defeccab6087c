"""Instrument data providers.

This module provides a unified interface (InstrumentProviderABC) for
fetching normalized instrument data:

- YahooFinanceProvider: charts, quotes and profiles via Yahoo Finance

Example:
    async with YahooFinanceProvider() as provider:
        quote = await provider.get_quote("AAPL")
        print(f"{quote.symbol}: {quote.current_price} {quote.currency}")

        chart = await provider.get_chart("^GSPC", "1d", "5m")
        print(f"{len(chart.timeseries)} points")
"""
from market_quotes.providers.core import (InstrumentProviderABC,
                                          ProviderError, ProviderErrorMapper,
                                          ResolverError, ShapeError)
from market_quotes.providers.yahoo import YahooFinanceProvider

__all__ = [
    "InstrumentProviderABC",
    "ProviderError",
    "ProviderErrorMapper",
    "ResolverError",
    "ShapeError",
    "YahooFinanceProvider",
]

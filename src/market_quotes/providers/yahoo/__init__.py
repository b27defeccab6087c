"""Yahoo Finance provider: chart, quote and profile resolvers."""
from market_quotes.providers.yahoo.chart import resolve_chart
from market_quotes.providers.yahoo.client import HttpxFetcher
from market_quotes.providers.yahoo.profile import ProfileKind, resolve_profile
from market_quotes.providers.yahoo.provider import YahooFinanceProvider
from market_quotes.providers.yahoo.quote import resolve_quote

__all__ = [
    "HttpxFetcher",
    "ProfileKind",
    "YahooFinanceProvider",
    "resolve_chart",
    "resolve_profile",
    "resolve_quote",
]

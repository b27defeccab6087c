"""API routers for instrument data endpoints.

Includes routes for:
- /instruments/{symbol}/chart - Price chart (time series + exchange metadata)
- /instruments/{symbol}/quote - Current quote snapshot
- /instruments/{symbol}/profile - Company profile or index components
- /instruments/quotes - Quotes for several symbols
"""
from market_quotes.routers.instruments import router as instruments_router

__all__ = ["instruments_router"]

"""Core provider abstractions."""
from market_quotes.providers.core.error_mapper import ProviderErrorMapper
from market_quotes.providers.core.events import (EventHook, ResolverEvent,
                                                 log_event)
from market_quotes.providers.core.exceptions import (ProviderError,
                                                     ResolverError, ShapeError)
from market_quotes.providers.core.instrument_provider_abc import \
    InstrumentProviderABC
from market_quotes.providers.core.protocols import FetchText
from market_quotes.providers.core.utils import (is_index_symbol,
                                                percent_value, price_decimals,
                                                raw_value)

__all__ = [
    "EventHook",
    "FetchText",
    "InstrumentProviderABC",
    "ProviderError",
    "ProviderErrorMapper",
    "ResolverError",
    "ResolverEvent",
    "ShapeError",
    "is_index_symbol",
    "log_event",
    "percent_value",
    "price_decimals",
    "raw_value",
]

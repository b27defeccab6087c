"""Instrument data service with dependency injection.

InstrumentService wraps any InstrumentProviderABC with error mapping and
symbol normalization.
"""
import asyncio
import logging
from collections.abc import Callable

import httpx

from market_quotes.providers.core import (InstrumentProviderABC,
                                          ProviderErrorMapper, ResolverError)
from market_quotes.schemas import (InstrumentProfile, NormalizedChart,
                                   NormalizedQuote)

logger = logging.getLogger(__name__)

# Exceptions from providers we map to HTTP; all others propagate (e.g. bugs, BaseException).
_PROVIDER_EXCEPTIONS: tuple[type[Exception], ...] = (
    ResolverError,
    TimeoutError,
    asyncio.TimeoutError,
    httpx.HTTPStatusError,
    httpx.TransportError,
)


class InstrumentService:
    """Service over an instrument provider; maps provider errors to HTTP."""

    def __init__(
        self,
        provider: InstrumentProviderABC,
        error_mapper: ProviderErrorMapper,
        *,
        symbol_normalizer: Callable[[str], str] | None = None,
    ) -> None:
        """Initialize with provider and error mapping config.

        Args:
            provider: The instrument data provider (e.g. YahooFinanceProvider).
            error_mapper: Maps provider exceptions to HTTP (resource_name, api_name).
            symbol_normalizer: Optional normalizer for symbols (e.g. str.upper).
        """
        self._provider = provider
        self._error_mapper = error_mapper
        self._normalize = symbol_normalizer or (lambda s: s)

    async def get_chart(
        self, symbol: str, range_: str, interval: str
    ) -> NormalizedChart:
        """Get a price chart. Raises HTTPException on provider errors."""
        try:
            return await self._provider.get_chart(self._normalize(symbol), range_, interval)
        except _PROVIDER_EXCEPTIONS as e:
            self._error_mapper.raise_http(e, symbol=symbol)

    async def get_quote(self, symbol: str) -> NormalizedQuote:
        """Get current quote. Raises HTTPException on provider errors."""
        try:
            return await self._provider.get_quote(self._normalize(symbol))
        except _PROVIDER_EXCEPTIONS as e:
            self._error_mapper.raise_http(e, symbol=symbol)

    async def get_quotes(self, symbols: list[str]) -> list[NormalizedQuote]:
        """Get quotes for several symbols concurrently; failed symbols are skipped."""
        results = await asyncio.gather(
            *[self._provider.get_quote(self._normalize(s)) for s in symbols],
            return_exceptions=True,
        )
        quotes: list[NormalizedQuote] = []
        for symbol, result in zip(symbols, results):
            if isinstance(result, NormalizedQuote):
                quotes.append(result)
            elif isinstance(result, _PROVIDER_EXCEPTIONS):
                logger.info("Skipping quote for %s: %s", symbol, result)
            elif isinstance(result, BaseException):
                raise result
        return quotes

    async def get_profile(self, symbol: str) -> InstrumentProfile:
        """Get company profile or index detail. Raises HTTPException on provider errors."""
        try:
            return await self._provider.get_profile(self._normalize(symbol))
        except _PROVIDER_EXCEPTIONS as e:
            self._error_mapper.raise_http(e, symbol=symbol)


def create_instrument_service(
    provider: InstrumentProviderABC,
    resource_name: str = "Instrument",
    api_name: str = "Yahoo Finance",
    *,
    symbol_normalizer: Callable[[str], str] | None = None,
) -> InstrumentService:
    """Create an InstrumentService with the given provider and error mapping config.

    Args:
        provider: The instrument data provider.
        resource_name: Label for 404 messages (e.g. "Instrument").
        api_name: Label for upstream errors (e.g. "Yahoo Finance").
        symbol_normalizer: Optional normalizer for symbols.
    """
    error_mapper = ProviderErrorMapper(resource_name=resource_name, api_name=api_name)
    return InstrumentService(
        provider,
        error_mapper,
        symbol_normalizer=symbol_normalizer,
    )

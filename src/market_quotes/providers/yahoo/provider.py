"""Yahoo Finance instrument data provider."""
from market_quotes.providers.core import InstrumentProviderABC
from market_quotes.providers.core.events import EventHook, log_event
from market_quotes.providers.core.protocols import FetchText
from market_quotes.providers.yahoo.chart import resolve_chart
from market_quotes.providers.yahoo.client import HttpxFetcher, default_base_url
from market_quotes.providers.yahoo.profile import resolve_profile
from market_quotes.providers.yahoo.quote import resolve_quote
from market_quotes.schemas import (InstrumentProfile, NormalizedChart,
                                   NormalizedQuote)


class YahooFinanceProvider(InstrumentProviderABC):
    """Instrument data provider over the Yahoo Finance JSON endpoints.

    No API key required. Each call issues exactly one request through the
    fetch collaborator; nothing is cached or retried.
    """

    def __init__(
        self,
        fetch: FetchText | None = None,
        base_url: str | None = None,
        on_event: EventHook | None = log_event,
    ) -> None:
        """Initialize the Yahoo Finance provider.

        Args:
            fetch: Fetch collaborator. Defaults to an HttpxFetcher owned by
                this provider (closed by close()).
            base_url: API host. Defaults to YAHOO_FINANCE_BASE_URL env var.
            on_event: Diagnostic hook passed to every resolver; None silences it.
        """
        self._fetcher = HttpxFetcher() if fetch is None else None
        self._fetch: FetchText = fetch or self._fetcher
        self._base_url = base_url or default_base_url()
        self._on_event = on_event

    async def get_chart(
        self, symbol: str, range_: str, interval: str
    ) -> NormalizedChart:
        return await resolve_chart(
            symbol,
            range_,
            interval,
            fetch=self._fetch,
            base_url=self._base_url,
            on_event=self._on_event,
        )

    async def get_quote(self, symbol: str) -> NormalizedQuote:
        return await resolve_quote(
            symbol,
            fetch=self._fetch,
            base_url=self._base_url,
            on_event=self._on_event,
        )

    async def get_profile(self, symbol: str) -> InstrumentProfile:
        return await resolve_profile(
            symbol,
            fetch=self._fetch,
            base_url=self._base_url,
            on_event=self._on_event,
        )

    async def close(self) -> None:
        """Close the HTTP client if this provider created it."""
        if self._fetcher is not None:
            await self._fetcher.close()

"""Abstract base class for instrument data providers."""
from abc import ABC, abstractmethod

from market_quotes.schemas import InstrumentProfile, NormalizedChart, NormalizedQuote


class InstrumentProviderABC(ABC):
    """Base interface for instrument data providers.

    Each provider resolves a symbol into a chart, a quote snapshot and a
    profile. Every call is independent: no shared state, no caching, no retry.
    """

    @abstractmethod
    async def get_chart(
        self, symbol: str, range_: str, interval: str
    ) -> NormalizedChart:
        """Fetch a price chart for a symbol.

        Args:
            symbol: Instrument symbol (e.g. "AAPL", "^GSPC").
            range_: Provider span passed through verbatim (e.g. "1d", "5y").
            interval: Provider granularity passed through verbatim (e.g. "5m").
        """

    @abstractmethod
    async def get_quote(self, symbol: str) -> NormalizedQuote:
        """Fetch the current quote snapshot for a symbol."""

    @abstractmethod
    async def get_profile(self, symbol: str) -> InstrumentProfile:
        """Fetch the company profile or index detail for a symbol."""

    async def close(self) -> None:
        """Clean up resources (connections, clients).

        Override in subclasses if cleanup is needed.
        """

    async def __aenter__(self) -> "InstrumentProviderABC":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        """Async context manager exit - calls close()."""
        await self.close()

"""HTTP side of the Yahoo Finance provider: URL building and the default fetcher."""
import logging
import os
from urllib.parse import quote

import httpx

from market_quotes.providers.yahoo.models import ChartParams, QuoteSummaryParams

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://query1.finance.yahoo.com"
DEFAULT_TIMEOUT = 10.0


def default_base_url() -> str:
    """Base URL from YAHOO_FINANCE_BASE_URL, falling back to query1."""
    return os.getenv("YAHOO_FINANCE_BASE_URL", DEFAULT_BASE_URL).rstrip("/")


def _endpoint(base_url: str, path: str, params: dict[str, str]) -> str:
    """Join base, path and URL-encoded query (',' in module lists becomes %2C)."""
    url = httpx.URL(f"{base_url.rstrip('/')}{path}", params=params)
    return str(url)


def chart_url(
    symbol: str, range_: str, interval: str, base_url: str | None = None
) -> str:
    """URL of the chart endpoint for symbol/range/interval."""
    params = ChartParams(symbol=symbol, range=range_, interval=interval).model_dump()
    return _endpoint(
        base_url or default_base_url(),
        f"/v8/finance/chart/{quote(symbol, safe='')}",
        params,
    )


def quote_summary_url(
    symbol: str, modules: tuple[str, ...], base_url: str | None = None
) -> str:
    """URL of the quote-summary endpoint for the requested modules."""
    params = QuoteSummaryParams(modules=modules).model_dump()
    return _endpoint(
        base_url or default_base_url(),
        f"/v10/finance/quoteSummary/{quote(symbol, safe='')}",
        params,
    )


class HttpxFetcher:
    """Default fetch collaborator backed by httpx.AsyncClient.

    Returns the body as text; non-2xx responses raise httpx.HTTPStatusError.
    No retry, no caching.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            client: Preconfigured client (tests pass one with a MockTransport).
            timeout: Seconds; defaults to YAHOO_FINANCE_TIMEOUT env var or 10.
        """
        if timeout is None:
            timeout = float(os.getenv("YAHOO_FINANCE_TIMEOUT", DEFAULT_TIMEOUT))
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    async def __call__(self, url: str) -> str:
        logger.debug("GET %s", url)
        response = await self._client.get(url)
        # Yahoo reports unknown symbols as 404 *with* an error envelope body;
        # hand that body to the resolver so the provider's description survives.
        if response.status_code == 404 and _looks_like_envelope(response):
            return response.text
        response.raise_for_status()
        return response.text

    async def close(self) -> None:
        """Close the HTTP client if this fetcher created it."""
        if self._owns_client:
            await self._client.aclose()


def _looks_like_envelope(response: httpx.Response) -> bool:
    content_type = response.headers.get("content-type", "")
    return "json" in content_type and (
        '"chart"' in response.text or '"quoteSummary"' in response.text
    )

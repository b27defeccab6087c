"""Tests for YahooFinanceProvider and the default logging hook."""
import asyncio
import logging

import httpx
import pytest

from helpers import CHART_PAYLOAD, NOT_FOUND_CHART, PRICE_PAYLOAD, FakeFetch
from market_quotes.providers import ProviderError, YahooFinanceProvider
from market_quotes.providers.core.events import ResolverEvent, log_event


class TestYahooFinanceProvider:
    @pytest.mark.asyncio
    async def test_delegates_with_base_url(self, hook):
        fetch = FakeFetch(CHART_PAYLOAD)
        async with YahooFinanceProvider(fetch=fetch, base_url="https://example.test", on_event=hook) as provider:
            chart = await provider.get_chart("AAPL", "1d", "5m")

        assert chart.symbol == "AAPL"
        assert httpx.URL(fetch.urls[0]).host == "example.test"
        assert hook.names == ["chart.points"]

    @pytest.mark.asyncio
    async def test_concurrent_calls_are_independent(self):
        fetch = FakeFetch(PRICE_PAYLOAD)
        provider = YahooFinanceProvider(fetch=fetch, base_url="https://example.test", on_event=None)

        quotes = await asyncio.gather(*[provider.get_quote(s) for s in ("AAPL", "MSFT", "GOOGL")])

        assert len(quotes) == 3
        assert len(fetch.urls) == 3
        assert quotes[0] is not quotes[1]

    @pytest.mark.asyncio
    async def test_owned_fetcher_is_closed(self):
        provider = YahooFinanceProvider(on_event=None)
        client = provider._fetcher._client

        await provider.close()

        assert client.is_closed


class TestLogEvent:
    @pytest.mark.asyncio
    async def test_provider_error_is_logged(self, caplog):
        provider = YahooFinanceProvider(fetch=FakeFetch(NOT_FOUND_CHART), base_url="https://example.test")

        with caplog.at_level(logging.WARNING, logger="market_quotes.providers.core.events"):
            with pytest.raises(ProviderError):
                await provider.get_chart("NOPE", "1d", "5m")

        assert "Error while resolving NOPE" in caplog.text
        assert "Not Found" in caplog.text

    def test_points_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="market_quotes.providers.core.events"):
            log_event(ResolverEvent("chart.points", "AAPL", {"count": 78}))

        assert caplog.records[0].levelno == logging.DEBUG
        assert "78" in caplog.text

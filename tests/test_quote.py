"""Tests for the quote resolver."""
import httpx
import pytest

from helpers import NOT_FOUND_SUMMARY, FakeFetch
from market_quotes.providers.core.exceptions import ProviderError, ShapeError
from market_quotes.providers.yahoo.quote import build_quote, resolve_quote

BASE = "https://query1.finance.yahoo.com"


def _price(payload):
    return payload["quoteSummary"]["result"][0]["price"]


class TestResolveQuote:
    @pytest.mark.asyncio
    async def test_flattens_price_module(self, price_payload, hook):
        quote = await resolve_quote("AAPL", fetch=FakeFetch(price_payload), base_url=BASE, on_event=hook)

        assert quote.symbol == "AAPL"
        assert quote.currency == "USD"
        assert quote.short_name == "Apple Inc."
        assert quote.instrument == "EQUITY"
        assert quote.exchange == "NMS"
        assert quote.exchange_name == "NasdaqGS"
        assert quote.price_decimals == 2
        assert quote.current_price == "189.70"
        assert quote.day_high_price == "190.96"
        assert quote.day_low_price == "188.65"
        assert quote.open_price == "189.57"
        assert quote.previous_close == "189.69"
        assert quote.price_change == "0.01"
        assert quote.price_change_percentage == "0.01"
        assert quote.volume == 24048344
        assert quote.market_cap == 2950000000000
        assert quote.updated_time == 1700000000000
        assert hook.events == []

    def test_integer_volume_and_market_cap_stay_integers(self, price_payload):
        quote = build_quote(price_payload["quoteSummary"]["result"][0])

        assert type(quote.volume) is int
        assert type(quote.market_cap) is int
        dumped = quote.model_dump_json(by_alias=True)
        assert '"volume":24048344' in dumped
        assert '"marketCap":2950000000000' in dumped

    @pytest.mark.asyncio
    async def test_requests_price_module(self, price_payload):
        fetch = FakeFetch(price_payload)
        await resolve_quote("AAPL", fetch=fetch, base_url=BASE, on_event=None)

        url = httpx.URL(fetch.urls[0])
        assert url.path == "/v10/finance/quoteSummary/AAPL"
        assert url.params["modules"] == "price"

    @pytest.mark.asyncio
    async def test_provider_error(self, hook):
        with pytest.raises(ProviderError, match="Quote not found for ticker symbol: NOPE"):
            await resolve_quote("NOPE", fetch=FakeFetch(NOT_FOUND_SUMMARY), base_url=BASE, on_event=hook)
        assert hook.names == ["quote.provider_error"]


class TestBuildQuote:
    def test_default_precision_without_price_hint(self, price_payload):
        price = _price(price_payload)
        del price["priceHint"]
        price["regularMarketPrice"] = {"raw": 123.456, "fmt": "123.46"}

        quote = build_quote(price_payload["quoteSummary"]["result"][0])

        assert quote.price_decimals == 2
        assert quote.current_price == "123.46"

    def test_huge_price_hint_is_bounded(self, price_payload):
        _price(price_payload)["priceHint"] = {"raw": 1e9, "fmt": "1000000000"}

        quote = build_quote(price_payload["quoteSummary"]["result"][0])

        assert quote.price_decimals == 100
        assert len(quote.current_price.split(".")[1]) == 100

    def test_price_hint_drives_precision(self, price_payload):
        price = _price(price_payload)
        price["priceHint"] = {"raw": 4, "fmt": "4"}
        price["regularMarketPrice"] = {"raw": 1.08349, "fmt": "1.0835"}

        quote = build_quote(price_payload["quoteSummary"]["result"][0])

        assert quote.price_decimals == 4
        assert quote.current_price == "1.0835"
        # percentage stays at 2 decimals regardless of the hint
        assert quote.price_change_percentage == "0.01"
        assert quote.open_price == "189.5700"

    def test_long_name_falls_back_to_short_name(self, price_payload):
        del _price(price_payload)["longName"]

        quote = build_quote(price_payload["quoteSummary"]["result"][0])

        assert quote.long_name == "Apple Inc."

    def test_missing_exchange_name_is_none(self, price_payload):
        del _price(price_payload)["exchangeName"]

        data = build_quote(price_payload["quoteSummary"]["result"][0]).model_dump(by_alias=True)

        assert "exchangeName" in data
        assert data["exchangeName"] is None

    def test_day_low_read_independently_of_day_high(self, price_payload):
        price = _price(price_payload)
        del price["regularMarketDayHigh"]

        quote = build_quote(price_payload["quoteSummary"]["result"][0])

        assert quote.day_high_price is None
        assert quote.day_low_price == "188.65"

    def test_optional_fields_absent(self, price_payload):
        price = _price(price_payload)
        for key in ("regularMarketVolume", "marketCap", "regularMarketChangePercent", "regularMarketOpen"):
            del price[key]
        price["regularMarketChange"] = {"fmt": "n/a"}

        quote = build_quote(price_payload["quoteSummary"]["result"][0])

        assert quote.volume is None
        assert quote.market_cap is None
        assert quote.price_change_percentage is None
        assert quote.open_price is None
        assert quote.price_change is None

    def test_missing_price_module(self):
        with pytest.raises(ShapeError) as exc_info:
            build_quote({})
        assert exc_info.value.path == "quoteSummary.result[0].price"

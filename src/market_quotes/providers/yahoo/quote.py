"""Quote resolver: quoteSummary?modules=price -> NormalizedQuote."""
from typing import Any

from market_quotes.providers.core.events import EventHook, log_event
from market_quotes.providers.core.protocols import FetchText
from market_quotes.providers.core.utils import (percent_value, price_decimals,
                                                raw_value, to_milliseconds)
from market_quotes.providers.yahoo.client import quote_summary_url
from market_quotes.providers.yahoo.envelope import (QUOTE_SUMMARY,
                                                    fetch_result, optional_str,
                                                    require)
from market_quotes.providers.yahoo.models import PRICE_MODULES
from market_quotes.schemas import NormalizedQuote

_RESULT = "quoteSummary.result[0]"


def _epoch_seconds(value: Any) -> float | int | None:
    """regularMarketTime comes either bare or as a {raw, fmt} pair."""
    if isinstance(value, dict):
        return raw_value(value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    return None


def build_quote(result: dict[str, Any]) -> NormalizedQuote:
    """Flatten the `price` module of a quote summary."""
    price = require(result, "price", _RESULT, dict)
    decimals = price_decimals(price.get("priceHint"))
    short_name = optional_str(price, "shortName")

    return NormalizedQuote(
        symbol=require(price, "symbol", f"{_RESULT}.price", str),
        currency=optional_str(price, "currency"),
        short_name=short_name,
        long_name=optional_str(price, "longName") or short_name,
        instrument=optional_str(price, "quoteType"),
        exchange=optional_str(price, "exchange"),
        exchange_name=optional_str(price, "exchangeName"),
        price_decimals=decimals,
        current_price=raw_value(price.get("regularMarketPrice"), decimals),
        day_high_price=raw_value(price.get("regularMarketDayHigh"), decimals),
        day_low_price=raw_value(price.get("regularMarketDayLow"), decimals),
        open_price=raw_value(price.get("regularMarketOpen"), decimals),
        previous_close=raw_value(price.get("regularMarketPreviousClose"), decimals),
        price_change=raw_value(price.get("regularMarketChange"), decimals),
        price_change_percentage=percent_value(price.get("regularMarketChangePercent")),
        volume=raw_value(price.get("regularMarketVolume")),
        market_cap=raw_value(price.get("marketCap")),
        updated_time=to_milliseconds(_epoch_seconds(price.get("regularMarketTime"))),
    )


async def resolve_quote(
    symbol: str,
    *,
    fetch: FetchText,
    base_url: str | None = None,
    on_event: EventHook | None = log_event,
) -> NormalizedQuote:
    """Fetch and flatten the current quote of symbol.

    Raises:
        ProviderError: The envelope's quoteSummary.error is populated.
        ShapeError: The price module or its symbol is missing.
    """
    return await fetch_result(
        fetch,
        quote_summary_url(symbol, PRICE_MODULES, base_url),
        kind=QUOTE_SUMMARY,
        endpoint="quote",
        symbol=symbol,
        build=build_quote,
        on_event=on_event,
    )

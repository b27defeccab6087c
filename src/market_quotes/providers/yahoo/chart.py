"""Chart resolver: /v8/finance/chart -> NormalizedChart."""
from typing import Any

from market_quotes.providers.core.events import (CHART_POINTS, EventHook,
                                                 ResolverEvent, emit, log_event)
from market_quotes.providers.core.exceptions import ShapeError
from market_quotes.providers.core.protocols import FetchText
from market_quotes.providers.core.utils import DECIMALS, to_milliseconds
from market_quotes.providers.yahoo.client import chart_url
from market_quotes.providers.yahoo.envelope import (CHART, fetch_result,
                                                    optional_mapping,
                                                    optional_str, require,
                                                    require_number)
from market_quotes.schemas import (Bar, ExchangeInfo, NormalizedChart,
                                   TradingPeriod)

_RESULT = "chart.result[0]"
_META = f"{_RESULT}.meta"
SERIES = ("open", "close", "high", "low", "volume")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _value_at(values: list[Any], idx: int) -> float | None:
    """values[idx] when present and numeric; None keeps the bar instead of failing."""
    if idx < len(values) and _is_number(values[idx]):
        return values[idx]
    return None


def _previous_close(meta: dict[str, Any]) -> float:
    # previousClose is only sent for intraday ranges; longer ranges carry
    # chartPreviousClose instead.
    for key in ("previousClose", "chartPreviousClose"):
        if _is_number(meta.get(key)):
            return meta[key]
    raise ShapeError(f"{_META}.previousClose", "missing")


def change_percentage(current: float, previous: float) -> str | None:
    """(current - previous) / previous * 100 as 2-decimal text; None if previous is 0."""
    if previous == 0:
        return None
    return f"{(current - previous) / previous * 100:.{DECIMALS}f}"


def _bars(result: dict[str, Any]) -> list[Bar]:
    timestamps = result.get("timestamp")
    if timestamps is None:
        # Yahoo drops the key entirely when the range has no trades.
        return []
    if not isinstance(timestamps, list):
        raise ShapeError(f"{_RESULT}.timestamp", "expected list")

    quotes = optional_mapping(result, "indicators").get("quote")
    quote = quotes[0] if isinstance(quotes, list) and quotes and isinstance(quotes[0], dict) else {}
    series = {
        name: quote[name] if isinstance(quote.get(name), list) else []
        for name in SERIES
    }

    bars: list[Bar] = []
    for idx, ts in enumerate(timestamps):
        if not _is_number(ts):
            raise ShapeError(f"{_RESULT}.timestamp[{idx}]", "expected number")
        bars.append(
            Bar(
                timestamp=to_milliseconds(ts),
                **{name: _value_at(values, idx) for name, values in series.items()},
            )
        )
    return bars


def build_chart(result: dict[str, Any]) -> NormalizedChart:
    """Flatten the first chart result."""
    meta = require(result, "meta", _RESULT, dict)
    current = require_number(meta, "regularMarketPrice", _META)
    previous = _previous_close(meta)
    regular = optional_mapping(optional_mapping(meta, "currentTradingPeriod"), "regular")
    market_time = meta.get("regularMarketTime")

    return NormalizedChart(
        symbol=require(meta, "symbol", _META, str),
        currency=optional_str(meta, "currency"),
        instrument=optional_str(meta, "instrumentType"),
        exchange=optional_str(meta, "exchangeName"),
        current_price=current,
        previous_close=previous,
        price_change=current - previous,
        price_change_percentage=change_percentage(current, previous),
        updated_time=to_milliseconds(market_time) if _is_number(market_time) else None,
        exchange_info=ExchangeInfo(
            timezone=optional_str(meta, "timezone"),
            timezone_name=optional_str(meta, "exchangeTimezoneName"),
            trading_period=TradingPeriod(
                start=regular.get("start"),
                end=regular.get("end"),
            ),
        ),
        timeseries=_bars(result),
    )


async def resolve_chart(
    symbol: str,
    range_: str,
    interval: str,
    *,
    fetch: FetchText,
    base_url: str | None = None,
    on_event: EventHook | None = log_event,
) -> NormalizedChart:
    """Fetch and flatten the price chart of symbol.

    Args:
        symbol: Instrument symbol as known to Yahoo (e.g. "AAPL", "^GSPC").
        range_: Span such as "1d", "5d", "1y"; passed through verbatim.
        interval: Granularity such as "5m", "1d"; passed through verbatim.
        fetch: Fetch collaborator returning the body text.
        base_url: Override of the API host.
        on_event: Diagnostic hook; None silences it.

    Raises:
        ProviderError: The envelope's chart.error is populated.
        ShapeError: A required member is missing or mistyped.
    """
    chart = await fetch_result(
        fetch,
        chart_url(symbol, range_, interval, base_url),
        kind=CHART,
        endpoint="chart",
        symbol=symbol,
        build=build_chart,
        on_event=on_event,
    )
    emit(on_event, ResolverEvent(CHART_POINTS, symbol, {"count": len(chart.timeseries)}))
    return chart

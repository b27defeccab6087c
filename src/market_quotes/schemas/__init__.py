"""Pydantic schemas for normalized instrument records. Not persisted.

Attributes are snake_case; the UI consumes the camelCase aliases
(model_dump(by_alias=True)).
"""
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RecordModel(BaseModel):
    """Base for every normalized record: camelCase aliases, immutable."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Bar(RecordModel):
    """One point of a chart; any value the provider left out is None."""

    timestamp: int  # ms since epoch
    open: int | float | None = None
    close: int | float | None = None
    high: int | float | None = None
    low: int | float | None = None
    volume: int | float | None = None


class TradingPeriod(RecordModel):
    """Regular trading session bounds (Unix seconds, as sent by the provider)."""

    start: int | None = None
    end: int | None = None


class ExchangeInfo(RecordModel):
    """Exchange metadata attached to a chart."""

    timezone: str | None = None
    timezone_name: str | None = None
    trading_period: TradingPeriod = Field(default_factory=TradingPeriod)


class NormalizedChart(RecordModel):
    """Flattened price chart for one symbol."""

    symbol: str
    currency: str | None = None
    instrument: str | None = None
    exchange: str | None = None
    current_price: int | float
    previous_close: int | float
    price_change: int | float
    price_change_percentage: str | None = Field(
        default=None,
        description="2-decimal text; None when the previous close is zero",
    )
    updated_time: int | None = Field(default=None, description="ms since epoch")
    exchange_info: ExchangeInfo = Field(default_factory=ExchangeInfo)
    timeseries: list[Bar] = Field(default_factory=list)


class NormalizedQuote(RecordModel):
    """Flattened quote snapshot.

    Price fields are text at `price_decimals` precision, the change percentage
    is always 2 decimals, volume and market cap stay numeric.
    """

    symbol: str
    currency: str | None = None
    short_name: str | None = None
    long_name: str | None = None
    instrument: str | None = None
    exchange: str | None = None
    exchange_name: str | None = None
    price_decimals: int = 2
    current_price: str | None = None
    day_high_price: str | None = None
    day_low_price: str | None = None
    open_price: str | None = None
    previous_close: str | None = None
    price_change: str | None = None
    price_change_percentage: str | None = None
    volume: int | float | None = None
    market_cap: int | float | None = None
    updated_time: int | None = Field(default=None, description="ms since epoch")


class PriceHistory(RecordModel):
    beta: str | None = None
    fifty_two_week_low: str | None = None
    fifty_two_week_high: str | None = None
    fifty_day_average: str | None = None
    two_hundred_day_average: str | None = None


class Dividend(RecordModel):
    rate: str | None = None
    yield_: str | None = Field(default=None, alias="yield")
    ex_date: str | None = None
    trailing_annual_rate: str | None = None
    trailing_annual_yield: str | None = None


class SummaryDetail(RecordModel):
    """Shared by index and company profiles."""

    currency: str | None = None
    price_history: PriceHistory = Field(default_factory=PriceHistory)
    dividend: Dividend = Field(default_factory=Dividend)


class SummaryProfile(RecordModel):
    """Company metadata (non-index instruments only)."""

    address: str | None = None
    phone: str | None = None
    website: str | None = None
    industry: str | None = None
    sector: str | None = None
    description: str | None = None
    full_time_employees: int | None = None


class IndexProfile(RecordModel):
    """Profile of an index. components is None when undisclosed (e.g. ^SPX)."""

    kind: Literal["index"] = "index"
    summary_detail: SummaryDetail
    components: list[str] | None = None
    summary_profile: None = None


class CompanyProfile(RecordModel):
    """Profile of any non-index instrument."""

    kind: Literal["company"] = "company"
    summary_detail: SummaryDetail
    summary_profile: SummaryProfile
    components: None = None


InstrumentProfile = Annotated[
    IndexProfile | CompanyProfile, Field(discriminator="kind")
]


__all__ = [
    "Bar",
    "CompanyProfile",
    "Dividend",
    "ExchangeInfo",
    "IndexProfile",
    "InstrumentProfile",
    "NormalizedChart",
    "NormalizedQuote",
    "PriceHistory",
    "SummaryDetail",
    "SummaryProfile",
    "TradingPeriod",
]

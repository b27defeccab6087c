"""Profile resolver: quoteSummary -> IndexProfile | CompanyProfile.

Whether a symbol is an index is decided once, from the symbol, and that
decision picks both the requested modules and the record variant.
"""
from enum import Enum
from functools import partial
from typing import Any

from market_quotes.providers.core.events import EventHook, log_event
from market_quotes.providers.core.exceptions import ShapeError
from market_quotes.providers.core.protocols import FetchText
from market_quotes.providers.core.utils import (is_index_symbol,
                                                percent_value, price_decimals,
                                                raw_value)
from market_quotes.providers.yahoo.client import quote_summary_url
from market_quotes.providers.yahoo.envelope import (QUOTE_SUMMARY,
                                                    fetch_result,
                                                    optional_mapping,
                                                    optional_str, require)
from market_quotes.providers.yahoo.models import (COMPANY_PROFILE_MODULES,
                                                  INDEX_PROFILE_MODULES)
from market_quotes.schemas import (CompanyProfile, Dividend, IndexProfile,
                                   InstrumentProfile, PriceHistory,
                                   SummaryDetail, SummaryProfile)

_RESULT = "quoteSummary.result[0]"


class ProfileKind(str, Enum):
    INDEX = "index"
    COMPANY = "company"

    @classmethod
    def for_symbol(cls, symbol: str) -> "ProfileKind":
        return cls.INDEX if is_index_symbol(symbol) else cls.COMPANY

    @property
    def modules(self) -> tuple[str, ...]:
        if self is ProfileKind.INDEX:
            return INDEX_PROFILE_MODULES
        return COMPANY_PROFILE_MODULES


def build_summary_detail(detail: dict[str, Any]) -> SummaryDetail:
    """Flatten summaryDetail; precision comes from its own priceHint."""
    decimals = price_decimals(detail.get("priceHint"))
    ex_date = optional_mapping(detail, "exDividendDate")
    return SummaryDetail(
        currency=optional_str(detail, "currency"),
        price_history=PriceHistory(
            beta=raw_value(detail.get("beta"), decimals),
            fifty_two_week_low=raw_value(detail.get("fiftyTwoWeekLow"), decimals),
            fifty_two_week_high=raw_value(detail.get("fiftyTwoWeekHigh"), decimals),
            fifty_day_average=raw_value(detail.get("fiftyDayAverage"), decimals),
            two_hundred_day_average=raw_value(detail.get("twoHundredDayAverage"), decimals),
        ),
        dividend=Dividend(
            rate=raw_value(detail.get("dividendRate"), decimals),
            # Yields are fractions; always shown as 2-decimal percentages.
            yield_=percent_value(detail.get("dividendYield")),
            ex_date=optional_str(ex_date, "fmt"),
            trailing_annual_rate=raw_value(detail.get("trailingAnnualDividendRate"), decimals),
            trailing_annual_yield=percent_value(detail.get("trailingAnnualDividendYield")),
        ),
    )


def format_address(profile: dict[str, Any]) -> str | None:
    """'address1, [address2, ]city zip, country', skipping absent parts."""
    locality = " ".join(
        part for part in (optional_str(profile, "city"), optional_str(profile, "zip")) if part
    )
    parts = [
        optional_str(profile, "address1"),
        optional_str(profile, "address2"),
        locality,
        optional_str(profile, "country"),
    ]
    present = [part for part in parts if part]
    return ", ".join(present) or None


def build_summary_profile(profile: dict[str, Any]) -> SummaryProfile:
    employees = profile.get("fullTimeEmployees")
    return SummaryProfile(
        address=format_address(profile),
        phone=optional_str(profile, "phone"),
        website=optional_str(profile, "website"),
        industry=optional_str(profile, "industry"),
        sector=optional_str(profile, "sector"),
        description=optional_str(profile, "longBusinessSummary"),
        full_time_employees=employees if isinstance(employees, int) and not isinstance(employees, bool) else None,
    )


def _components(result: dict[str, Any]) -> list[str] | None:
    """Constituent symbols; None (not []) when the provider discloses none (e.g. ^SPX)."""
    components = optional_mapping(result, "components").get("components")
    if components is None:
        return None
    if not isinstance(components, list):
        raise ShapeError(f"{_RESULT}.components.components", "expected list")
    return [str(symbol) for symbol in components]


def build_profile(result: dict[str, Any], kind: ProfileKind) -> InstrumentProfile:
    """Build the record variant selected by kind."""
    summary_detail = build_summary_detail(
        require(result, "summaryDetail", _RESULT, dict)
    )
    if kind is ProfileKind.INDEX:
        return IndexProfile(
            summary_detail=summary_detail,
            components=_components(result),
        )
    return CompanyProfile(
        summary_detail=summary_detail,
        summary_profile=build_summary_profile(
            require(result, "summaryProfile", _RESULT, dict)
        ),
    )


async def resolve_profile(
    symbol: str,
    *,
    fetch: FetchText,
    base_url: str | None = None,
    on_event: EventHook | None = log_event,
) -> InstrumentProfile:
    """Fetch and flatten the profile of symbol.

    Index symbols ('^' prefix) give an IndexProfile with components; any other
    symbol gives a CompanyProfile with summary_profile.

    Raises:
        ProviderError: The envelope's quoteSummary.error is populated.
        ShapeError: A requested module is missing from the result.
    """
    kind = ProfileKind.for_symbol(symbol)
    return await fetch_result(
        fetch,
        quote_summary_url(symbol, kind.modules, base_url),
        kind=QUOTE_SUMMARY,
        endpoint="profile",
        symbol=symbol,
        build=partial(build_profile, kind=kind),
        on_event=on_event,
    )

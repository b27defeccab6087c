"""Models for Yahoo Finance request parameters."""
from pydantic import BaseModel, field_serializer

PRICE_MODULES = ("price",)
INDEX_PROFILE_MODULES = ("summaryDetail", "components")
COMPANY_PROFILE_MODULES = ("summaryProfile", "summaryDetail")


class ChartParams(BaseModel):
    """Params for /v8/finance/chart/{symbol}. range/interval are not validated."""

    symbol: str
    range: str
    interval: str


class QuoteSummaryParams(BaseModel):
    """Params for /v10/finance/quoteSummary/{symbol}."""

    modules: tuple[str, ...]

    @field_serializer("modules")
    def _join_modules(self, modules: tuple[str, ...]) -> str:
        return ",".join(modules)

"""Instrument data routes (Yahoo Finance).

Handlers only call the service; responses use the camelCase aliases the UI
expects.
"""
import logging
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query

from market_quotes.deps import InstrumentServiceDep
from market_quotes.providers.core.utils import normalize_symbol
from market_quotes.schemas import (InstrumentProfile, NormalizedChart,
                                   NormalizedQuote)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/instruments", tags=["instruments"])


@router.get(
    "/quotes",
    response_model=list[NormalizedQuote],
    response_model_by_alias=True,
)
async def get_quotes(
    service: InstrumentServiceDep,
    symbols: Annotated[str, Query(description="Comma-separated symbols, e.g. AAPL,MSFT")] = "",
) -> list[NormalizedQuote]:
    """Get quotes for several symbols: /instruments/quotes?symbols=AAPL,MSFT.

    Repeated symbols are requested once; symbols the provider cannot resolve
    are left out of the response.
    """
    symbol_list = list(dict.fromkeys(normalize_symbol(s) for s in symbols.split(",") if s.strip()))
    if not symbol_list:
        raise HTTPException(
            status_code=422,
            detail="Query param 'symbols' required (e.g. ?symbols=AAPL,MSFT)",
        )
    return await service.get_quotes(symbol_list)


@router.get(
    "/{symbol}/chart",
    response_model=NormalizedChart,
    response_model_by_alias=True,
)
async def get_chart(
    symbol: str,
    service: InstrumentServiceDep,
    range_: str = Query(default="1d", alias="range", description="Span, e.g. 1d, 5d, 1y"),
    interval: str = Query(default="5m", description="Granularity, e.g. 5m, 1d"),
) -> NormalizedChart:
    """Get the price chart of a symbol.

    Args:
        symbol: Instrument symbol (e.g., "AAPL", "^GSPC").
        range_: Provider span, passed through verbatim.
        interval: Provider granularity, passed through verbatim.
    """
    return await service.get_chart(symbol, range_, interval)


@router.get(
    "/{symbol}/quote",
    response_model=NormalizedQuote,
    response_model_by_alias=True,
)
async def get_quote(symbol: str, service: InstrumentServiceDep) -> NormalizedQuote:
    """Get the current quote of a symbol."""
    return await service.get_quote(symbol)


@router.get(
    "/{symbol}/profile",
    response_model=InstrumentProfile,
    response_model_by_alias=True,
)
async def get_profile(symbol: str, service: InstrumentServiceDep) -> InstrumentProfile:
    """Get the company profile, or the detail and components of an index ('^' symbols)."""
    return await service.get_profile(symbol)

"""Main module for the instrument data service."""
import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from market_quotes.providers import YahooFinanceProvider
from market_quotes.providers.core.utils import normalize_symbol
from market_quotes.routers import instruments_router
from market_quotes.services import create_instrument_service

logger = logging.getLogger(__name__)

HOST = "127.0.0.1"
PORT = 8001


@asynccontextmanager
async def lifespan(fastapi_app: FastAPI):
    """Create the provider and service at startup; close the provider on shutdown."""
    provider = YahooFinanceProvider()
    fastapi_app.state.instrument_service = create_instrument_service(
        provider, "Instrument", "Yahoo Finance", symbol_normalizer=normalize_symbol
    )
    fastapi_app.state.provider = provider

    yield

    try:
        await provider.close()
    except Exception as exc:  # pylint: disable=broad-except
        logger.warning("Error closing provider %s: %s", type(provider).__name__, exc)


app = FastAPI(
    title="Market Quotes",
    description="Normalized charts, quotes and profiles from Yahoo Finance",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(instruments_router)


@app.get("/")
def health():
    """Return health check status."""
    return {"status": "ok"}


def run():
    """Run the server (uvicorn). Use for the `market-quotes` script."""
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
    uvicorn.run("market_quotes.main:app", host=HOST, port=PORT)

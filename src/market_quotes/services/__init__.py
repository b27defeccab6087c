"""Service layer: provider orchestration and exception-to-HTTP mapping."""
from market_quotes.services.instrument_service import (
    InstrumentService, create_instrument_service)

__all__ = [
    "InstrumentService",
    "create_instrument_service",
]

"""FastAPI dependency injection: app.state holds singletons; Depends() resolves them.

Lifespan (main.py) creates the provider and service once and attaches them
to app.state; these getters are used by Depends().
"""
from typing import Annotated

from fastapi import Depends, Request

from market_quotes.services import InstrumentService


def get_instrument_service(request: Request) -> InstrumentService:
    """Resolve InstrumentService from app.state (created at startup)."""
    return request.app.state.instrument_service


# Type alias for route injection
InstrumentServiceDep = Annotated[InstrumentService, Depends(get_instrument_service)]

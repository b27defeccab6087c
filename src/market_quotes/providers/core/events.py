"""Diagnostic events emitted by the resolvers.

Resolvers never print. They hand a ResolverEvent to an optional hook; the
default hook forwards it to the logging module so callers can route or
silence it through standard logging configuration.
"""
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from market_quotes.providers.core.exceptions import ProviderError

logger = logging.getLogger(__name__)

CHART_POINTS = "chart.points"
PROVIDER_ERROR = "provider_error"
SHAPE_ERROR = "shape_error"


@dataclass(frozen=True)
class ResolverEvent:
    """A single diagnostic emitted by a resolver."""

    name: str
    symbol: str
    detail: dict[str, Any] = field(default_factory=dict)

    @property
    def is_error(self) -> bool:
        return self.name.endswith((PROVIDER_ERROR, SHAPE_ERROR))


EventHook = Callable[[ResolverEvent], None]


def log_event(event: ResolverEvent) -> None:
    """Default hook: log errors at WARNING, everything else at DEBUG."""
    if event.is_error:
        logger.warning("Error while resolving %s: %s", event.symbol, event.detail)
    else:
        logger.debug("%s for %s: %s", event.name, event.symbol, event.detail)


def emit(hook: EventHook | None, event: ResolverEvent) -> None:
    """Send event to hook if one is configured."""
    if hook is not None:
        hook(event)


def report_failure(
    hook: EventHook | None, endpoint: str, symbol: str, error: Exception
) -> None:
    """Emit `<endpoint>.provider_error` or `<endpoint>.shape_error` for error."""
    if isinstance(error, ProviderError):
        detail = error.payload or {"description": error.description}
        emit(hook, ResolverEvent(f"{endpoint}.{PROVIDER_ERROR}", symbol, dict(detail)))
    else:
        emit(hook, ResolverEvent(f"{endpoint}.{SHAPE_ERROR}", symbol, {"message": str(error)}))

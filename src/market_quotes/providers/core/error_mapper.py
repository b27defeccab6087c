"""Domain concept for mapping resolver exceptions to HTTP responses."""
import asyncio
from dataclasses import dataclass

import httpx
from fastapi import HTTPException

from market_quotes.providers.core.exceptions import ProviderError, ShapeError


@dataclass(frozen=True)
class ProviderErrorMapper:
    """Maps resolver/transport exceptions to HTTP (status_code, detail).

    Inject this into services to centralize error-to-HTTP mapping with
    appropriate resource and API names.
    """

    resource_name: str = "Instrument"
    api_name: str = "Yahoo Finance"

    def _not_found(self, symbol: str | None) -> str:
        if symbol is None:
            return f"{self.resource_name} not found"
        return f"{self.resource_name} '{symbol}' not found"

    def to_http(
        self,
        exc: Exception,
        symbol: str | None = None,
    ) -> tuple[int, str]:
        """Map an exception to (status_code, detail) for HTTP responses.

        Args:
            exc: The exception raised by a resolver or the fetch collaborator.
            symbol: Optional symbol to include in detail (e.g. "AAPL").

        Returns:
            (status_code, detail) suitable for HTTPException(status_code=..., detail=...).
        """
        if isinstance(exc, ProviderError):
            # The provider's description is what the UI shows, keep it verbatim.
            if exc.code and exc.code.lower().replace(" ", "") == "notfound":
                return (404, exc.description)
            return (502, exc.description)
        if isinstance(exc, ShapeError):
            return (502, f"{self.api_name} returned an unexpected response: {exc}")
        if isinstance(exc, httpx.HTTPStatusError):
            status = exc.response.status_code
            if status == 404:
                return (404, self._not_found(symbol))
            if status >= 500:
                return (502, f"{self.api_name} error")
            return (status, f"{self.api_name} error")
        if isinstance(exc, (asyncio.TimeoutError, TimeoutError, httpx.TimeoutException)):
            detail = "Request timed out"
            if symbol is not None:
                detail = f"Request to {self.api_name} timed out for '{symbol}'"
            return (504, detail)
        if isinstance(exc, httpx.TransportError):
            return (502, f"{self.api_name} unreachable")
        return (500, "Internal server error")

    def raise_http(
        self,
        exc: Exception,
        symbol: str | None = None,
    ) -> None:
        """Map exception to HTTP and raise HTTPException. Never returns."""
        status_code, detail = self.to_http(exc, symbol=symbol)
        raise HTTPException(status_code=status_code, detail=detail) from exc

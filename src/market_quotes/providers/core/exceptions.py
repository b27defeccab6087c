"""Typed failures raised while resolving provider responses."""
from typing import Any


class ResolverError(Exception):
    """Base class for failures produced by the resolvers."""


class ProviderError(ResolverError):
    """The provider's envelope reported a structured error.

    str(exc) is the provider's own description so callers can render it as-is.
    """

    def __init__(
        self,
        description: str,
        code: str | None = None,
        symbol: str | None = None,
        payload: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(description)
        self.description = description
        self.code = code
        self.symbol = symbol
        self.payload = payload or {}

    @classmethod
    def from_envelope(
        cls, error: Any, symbol: str | None = None
    ) -> "ProviderError":
        """Build from the envelope's `error` member (normally {code, description})."""
        if isinstance(error, dict):
            description = error.get("description") or error.get("code") or "Unknown provider error"
            code = error.get("code")
            return cls(str(description), code=code, symbol=symbol, payload=error)
        return cls(str(error), symbol=symbol)


class ShapeError(ResolverError):
    """A required member of the response is missing or has the wrong type."""

    def __init__(self, path: str, message: str = "missing or malformed") -> None:
        super().__init__(f"Unexpected response shape at '{path}': {message}")
        self.path = path

"""Unwrapping of Yahoo Finance response envelopes.

Every endpoint answers {<kind>: {"error": {...} | null, "result": [payload]}}.
The helpers here turn raw text into either the first result or a typed
failure, and give the resolvers checked access to required members.
"""
import json
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from pydantic import ValidationError

from market_quotes.providers.core.events import EventHook, report_failure
from market_quotes.providers.core.exceptions import (ProviderError,
                                                     ResolverError, ShapeError)
from market_quotes.providers.core.protocols import FetchText

T = TypeVar("T")

CHART = "chart"
QUOTE_SUMMARY = "quoteSummary"


@dataclass(frozen=True)
class Parsed(Generic[T]):
    """Successful parse."""

    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class ParseFailure:
    """Failed parse; error is a ProviderError or a ShapeError."""

    error: ResolverError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise self.error


ParseOutcome = Union[Parsed[T], ParseFailure]


def parse_json(text: str) -> ParseOutcome[Any]:
    """Decode response text."""
    try:
        return Parsed(json.loads(text))
    except (TypeError, ValueError) as e:
        return ParseFailure(ShapeError("$", f"invalid JSON ({e})"))


def unwrap_envelope(
    document: Any, kind: str, symbol: str | None = None
) -> ParseOutcome[dict[str, Any]]:
    """Return the first result of the `kind` container, or the failure.

    A populated `error` wins over everything else in the container.
    """
    if not isinstance(document, dict) or not isinstance(document.get(kind), dict):
        return ParseFailure(ShapeError(kind, "envelope container missing"))
    container = document[kind]
    error = container.get("error")
    if error is not None:
        return ParseFailure(ProviderError.from_envelope(error, symbol=symbol))
    result = container.get("result")
    if not isinstance(result, list) or not result:
        return ParseFailure(ShapeError(f"{kind}.result", "empty or missing"))
    if not isinstance(result[0], dict):
        return ParseFailure(ShapeError(f"{kind}.result[0]", "not an object"))
    return Parsed(result[0])


def require(mapping: dict[str, Any], key: str, path: str, kind: type | tuple[type, ...] = object) -> Any:
    """Return mapping[key], raising ShapeError when missing, null or mistyped."""
    value = mapping.get(key) if isinstance(mapping, dict) else None
    if value is None:
        raise ShapeError(f"{path}.{key}", "missing")
    if kind is not object and (isinstance(value, bool) or not isinstance(value, kind)):
        raise ShapeError(f"{path}.{key}", f"expected {_type_name(kind)}")
    return value


def require_number(mapping: dict[str, Any], key: str, path: str) -> float | int:
    return require(mapping, key, path, (int, float))


def optional_mapping(mapping: dict[str, Any], key: str) -> dict[str, Any]:
    """Return mapping[key] when it is an object, else an empty dict."""
    value = mapping.get(key) if isinstance(mapping, dict) else None
    return value if isinstance(value, dict) else {}


def optional_str(mapping: dict[str, Any], key: str) -> str | None:
    value = mapping.get(key)
    if value is None or value == "":
        return None
    return str(value)


def _type_name(kind: type | tuple[type, ...]) -> str:
    if isinstance(kind, tuple):
        return " or ".join(k.__name__ for k in kind)
    return kind.__name__


def parse_response(
    text: str,
    kind: str,
    symbol: str,
    build: Callable[[dict[str, Any]], T],
) -> ParseOutcome[T]:
    """Decode text, unwrap the `kind` envelope and build a record from result[0].

    Shape problems met while building (including model validation) come back
    as a ParseFailure instead of escaping as bare KeyError/TypeError.
    """
    outcome = parse_json(text)
    if not outcome.ok:
        return outcome
    outcome = unwrap_envelope(outcome.value, kind, symbol)
    if not outcome.ok:
        return outcome
    try:
        return Parsed(build(outcome.value))
    except ShapeError as e:
        return ParseFailure(e)
    except ValidationError as e:
        return ParseFailure(ShapeError(f"{kind}.result[0]", str(e)))


async def fetch_result(
    fetch: FetchText,
    url: str,
    *,
    kind: str,
    endpoint: str,
    symbol: str,
    build: Callable[[dict[str, Any]], T],
    on_event: EventHook | None,
) -> T:
    """Fetch url once, parse it and return the built record or raise the typed failure."""
    text = await fetch(url)
    outcome = parse_response(text, kind, symbol, build)
    if not outcome.ok:
        report_failure(on_event, endpoint, symbol, outcome.error)
    return outcome.unwrap()

"""Shared utilities for reading Yahoo Finance values."""
import math
from numbers import Real
from typing import Any

DECIMALS = 2
MAX_DECIMALS = 100
INDEX_PREFIX = "^"


def _raw_number(value: Any) -> float | int | None:
    """Return value["raw"] when it is a real number, else None."""
    if not isinstance(value, dict):
        return None
    raw = value.get("raw")
    if isinstance(raw, bool) or not isinstance(raw, Real):
        return None
    return raw


def raw_value(value: Any, decimals: int | None = None) -> float | int | str | None:
    """Read the `raw` number of a {raw, fmt} pair.

    Formatted as text with `decimals` digits when given, returned bare otherwise.
    Anything whose `raw` is not a number is treated as absent (None).

    We format ourselves instead of trusting `fmt`, which follows the provider's
    locale for separators.
    """
    raw = _raw_number(value)
    if raw is None:
        return None
    if decimals is None:
        return raw
    return f"{raw:.{decimals}f}"


def percent_value(value: Any) -> str | None:
    """Read a provider fraction as a percentage text with 2 decimals."""
    raw = _raw_number(value)
    if raw is None:
        return None
    return f"{raw * 100:.{DECIMALS}f}"


def price_decimals(price_hint: Any) -> int:
    """Resolve the decimal precision from a priceHint value; default 2, at most 100."""
    raw = _raw_number(price_hint)
    if raw is None or not math.isfinite(raw):
        return DECIMALS
    return int(min(max(raw, 0), MAX_DECIMALS))


def to_milliseconds(seconds: float | int | None) -> int | None:
    """Convert a Unix timestamp in seconds to milliseconds; preserve None."""
    if seconds is None or isinstance(seconds, bool):
        return None
    return int(seconds * 1000)


def is_index_symbol(symbol: str) -> bool:
    """Index symbols start with '^' (e.g. ^GSPC, ^DJI)."""
    return symbol.startswith(INDEX_PREFIX)


def normalize_symbol(symbol: str) -> str:
    """Normalize a ticker (strip, uppercase); '^' of index symbols is kept."""
    return symbol.strip().upper()

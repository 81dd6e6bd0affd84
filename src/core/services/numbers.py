"""Numeric token extraction from scanimage parameter text.

Unit suffixes (`dpi`, `mm`, `%`) are noise here: `"75..1200dpi"` and
`"50|75|100%"` only carry the numbers. Nothing in this module raises; a
fragment that is not a number becomes NaN and callers decide what that means.
"""

from __future__ import annotations

import math
import re

_NOISE = re.compile(r"[a-z%]", re.IGNORECASE)


def to_number(text: str) -> float:
    """Coerce `text` to a float, NaN when it is not a number."""

    value = text.strip()
    if not value:
        return math.nan
    try:
        return float(value)
    except ValueError:
        return math.nan


def extract_numbers(text: str, delimiter: str) -> list[float]:
    """Strip letters and `%` from `text`, split on `delimiter`, convert each part."""

    cleaned = _NOISE.sub("", text)
    return [to_number(fragment) for fragment in cleaned.split(delimiter)]


def floor_number(value: float) -> int | float:
    """`math.floor` that lets NaN and infinities through unchanged."""

    if not math.isfinite(value):
        return value
    return math.floor(value)

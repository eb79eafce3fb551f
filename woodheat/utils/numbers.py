"""Lenient number parsing and display formatting.

User-entered values and dataset cells arrive as text, numbers, booleans
or nothing at all. These helpers turn them into finite floats or None,
so nothing downstream ever sees NaN.
"""

from __future__ import annotations

import math
from typing import Any

PLACEHOLDER = "—"


def parse_finite(value: Any) -> float | None:
    """Parse a value into a finite float.

    Parameters
    ----------
    value : Any
        A number, numeric string, or anything else.

    Returns
    -------
    float | None
        The parsed value, or None for blanks, booleans, non-numeric text,
        NaN and infinities.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        try:
            number = float(value)
        except (TypeError, ValueError):
            return None
    if not math.isfinite(number):
        return None
    return number


def parse_positive(value: Any) -> float | None:
    """Parse a value into a finite float greater than zero."""
    number = parse_finite(value)
    if number is None or number <= 0:
        return None
    return number


def clamp(x: float, lo: float, hi: float) -> float:
    """Limit ``x`` to the closed interval [lo, hi]."""
    return max(lo, min(hi, x))


def format_number(x: float | None, digits: int = 0) -> str:
    """Format a number with thousands separators.

    Parameters
    ----------
    x : float | None
        Value to format.
    digits : int
        Maximum number of fraction digits; trailing zeros are dropped.

    Returns
    -------
    str
        The formatted number, or an em dash placeholder when the value
        is missing or not finite.
    """
    if x is None or not math.isfinite(x):
        return PLACEHOLDER
    text = f"{x:,.{digits}f}"
    if digits > 0:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text

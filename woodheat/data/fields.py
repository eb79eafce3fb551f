"""Field accessors shared by the aggregation passes.

Each accessor returns a cleaned value or None when the row cannot
contribute; callers skip such rows.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Any

from woodheat.models.constants import Column
from woodheat.utils.numbers import parse_finite

_WHITESPACE = re.compile(r"\s+")


def country_code(row: Mapping[str, Any]) -> str | None:
    """Trimmed, upper-cased ISO3 code; None unless a non-blank string."""
    raw = row.get(Column.ISO3)
    if not isinstance(raw, str):
        return None
    code = raw.strip().upper()
    return code or None


def area_name(row: Mapping[str, Any], fallback: str) -> str:
    """Trimmed display name, or ``fallback`` when blank or not text."""
    raw = row.get(Column.AREA)
    if isinstance(raw, str) and raw.strip():
        return raw.strip()
    return fallback


def normalized_unit(row: Mapping[str, Any]) -> str:
    """Lower-cased unit with all whitespace removed."""
    raw = row.get(Column.UNIT)
    if not isinstance(raw, str):
        return ""
    return _WHITESPACE.sub("", raw.lower())


def finite_value(row: Mapping[str, Any]) -> float | None:
    """The Value column as a finite float."""
    return parse_finite(row.get(Column.VALUE))


def day(row: Mapping[str, Any]) -> str | None:
    """Date truncated to its first ten characters (YYYY-MM-DD)."""
    raw = row.get(Column.DATE)
    if raw is None:
        return None
    if isinstance(raw, float) and math.isnan(raw):
        return None
    if hasattr(raw, "strftime"):
        return str(raw.strftime("%Y-%m-%d"))
    text = str(raw).strip()[:10]
    return text or None

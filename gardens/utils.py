from __future__ import annotations

from typing import Any, Optional, Sequence
import math

import pandas as pd

# SQLite INTEGER is a signed 64-bit value
SQLITE_INT_MIN = -(2 ** 63)
SQLITE_INT_MAX = 2 ** 63 - 1


def is_valid_number(v: Any) -> bool:
    """Check if value is a real, finite number (not None/NaN/inf/bool)."""
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        return False
    try:
        return math.isfinite(float(v))
    except OverflowError:
        # ints too large for a double
        return False


def parse_float(v: Any, default: Optional[float] = None) -> Optional[float]:
    """Parse a number or numeric string; return default if missing/invalid."""
    if isinstance(v, bool) or v is None:
        return default
    if isinstance(v, (int, float)):
        return float(v) if is_valid_number(v) else default
    if isinstance(v, str):
        if not v.strip():
            return default
        try:
            parsed = float(pd.to_numeric(v.strip(), errors="coerce"))
        except (OverflowError, TypeError, ValueError):
            return default
        return parsed if is_valid_number(parsed) else default
    return default


def parse_int(v: Any, default: Optional[int] = None) -> Optional[int]:
    """Parse an integer count; fractional values are truncated, out-of-range ones rejected."""
    f = parse_float(v)
    if f is None:
        return default
    n = int(f)
    if not SQLITE_INT_MIN <= n <= SQLITE_INT_MAX:
        return default
    return n


def parse_text(v: Any, default: str = "") -> str:
    """Return v as text; None and containers fall back to default."""
    if v is None or isinstance(v, (dict, list, tuple)):
        return default
    if isinstance(v, str):
        return v
    if isinstance(v, float) and v.is_integer():
        # 2009.0 -> "2009"
        return str(int(v))
    return str(v)


def first_text(*values: Any, default: str = "") -> str:
    """First value that yields non-blank text, else default."""
    for v in values:
        t = parse_text(v).strip()
        if t:
            return t
    return default


def point_from_geo(geo: Any) -> tuple[Optional[float], Optional[float]]:
    """
    Get (lat, lon) from a `geo_point_2d` value.

    A two-element ordered pair is read as [lat, lon]; an object is read
    through its `lat`/`lon` members. Anything else yields (None, None).
    """
    if isinstance(geo, (list, tuple)):
        pair: Sequence[Any] = geo
        if len(pair) != 2:
            return None, None
        return parse_float(pair[0]), parse_float(pair[1])
    if isinstance(geo, dict):
        return parse_float(geo.get("lat")), parse_float(geo.get("lon"))
    return None, None

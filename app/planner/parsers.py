# backend/app/planner/parsers.py
from __future__ import annotations

import math
import re
from typing import Any, Optional


_CLEAN_RE = re.compile(r"[,\s_]")
_CURRENCY_RE = re.compile(r"[$€£₹]|usd|dollars?", re.IGNORECASE)
_SUFFIXED_RE = re.compile(r"^(-?[0-9]*\.?[0-9]+)(k|m|mm|%)$")

_MULTIPLIERS = {
    "k": 1000.0,
    "m": 1000000.0,
    "mm": 1000000.0,
    "%": 0.01,
}


def parse_number(value: Any) -> Optional[float]:
    """
    Tolerant numeric parser.
    Handles:
      - 72000, "72000", "72,000"
      - "$72,000", "72000 USD"
      - "72k", "1.2m", "6.5%"
    Returns a finite float or None. Booleans are not numbers here.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        f = float(value)
        return f if math.isfinite(f) else None

    s = str(value).strip()
    if not s:
        return None

    s = _CURRENCY_RE.sub("", s).strip().lower()
    s = _CLEAN_RE.sub("", s)

    m = _SUFFIXED_RE.match(s)
    if m:
        return float(m.group(1)) * _MULTIPLIERS[m.group(2)]

    try:
        f = float(s)
    except ValueError:
        return None
    return f if math.isfinite(f) else None


def clamp(n: float, lo: Optional[float], hi: Optional[float]) -> float:
    if lo is not None and n < lo:
        return lo
    if hi is not None and n > hi:
        return hi
    return n


def round_half_up(n: float, digits: int = 0) -> float:
    scale = 10 ** digits
    return math.floor(n * scale + 0.5) / scale


def money(n: Any) -> int:
    if n is None or not math.isfinite(n):
        return 0
    return int(round_half_up(n))


def round2(n: float) -> float:
    return round_half_up(n, 2)


def pct(n: Any) -> float:
    if n is None or not math.isfinite(n):
        return 0.0
    return round2(n * 100)

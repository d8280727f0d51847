# backend/app/planner/metrics.py
from __future__ import annotations

from typing import Iterable, Optional, Sequence

from .assumptions import IRR_BRACKET, IRR_ITERATIONS
from .cashflows import CashflowYear


def npv(cashflows: Sequence[float], rate: float) -> float:
    """
    Net present value with the first cashflow discounted one full period:
    NPV = sum cf[t] / (1+r)^(t+1)
    """
    v = 0.0
    for t, cf in enumerate(cashflows):
        v += cf / (1.0 + rate) ** (t + 1)
    return v


def irr(cashflows: Sequence[float]) -> Optional[float]:
    """
    Annual IRR by bisection over IRR_BRACKET.

    Returns None when the series never changes sign. Assumes a single sign
    change in the cumulative shape (costs first, income later); for series
    with several sign changes the root found is one of possibly many.
    """
    has_pos = any(c > 0 for c in cashflows)
    has_neg = any(c < 0 for c in cashflows)
    if not has_pos or not has_neg:
        return None

    lo, hi = IRR_BRACKET
    for _ in range(IRR_ITERATIONS):
        mid = (lo + hi) / 2.0
        if npv(cashflows, mid) > 0:
            lo = mid
        else:
            hi = mid
    return (lo + hi) / 2.0


def payback_year(cashflows: Iterable[float]) -> Optional[int]:
    """First 1-based year where the running total is non-negative."""
    cum = 0.0
    for i, cf in enumerate(cashflows, start=1):
        cum += cf
        if cum >= 0:
            return i
    return None


def lifetime_gross(timeline: Iterable[CashflowYear]) -> float:
    return sum(t.gross_income for t in timeline if t.phase == "career")


def lifetime_net(timeline: Iterable[CashflowYear]) -> float:
    return sum(t.net_cashflow for t in timeline if t.phase == "career")

# backend/app/planner/dampeners.py
from __future__ import annotations

import math
from dataclasses import dataclass

from .assumptions import INPUT_BOUNDS
from .parsers import clamp


@dataclass(frozen=True)
class Dampeners:
    exposure: float
    annual_disruption_prob: float
    growth_haircut: float
    plateau_year: int
    plateau_growth: float
    early_seat_friction: float


def compression_dampeners(exposure: float) -> Dampeners:
    """
    Convert a 0..10 automation-exposure score into macro earnings dampeners.

    Higher exposure means more compression risk: a higher annual disruption
    hazard, a bigger haircut on wage growth, an earlier and flatter plateau,
    and more friction getting into the first seats.
    """
    s = clamp(float(exposure), *INPUT_BOUNDS["automationExposure"])
    x = s / 10.0

    return Dampeners(
        exposure=s,
        annual_disruption_prob=clamp(0.01 + 0.018 * x, 0.01, 0.04),
        growth_haircut=clamp(0.35 * x, 0.0, 0.35),
        # half rounds up: 12 years at s=0 down to 6 years at s=10
        plateau_year=int(math.floor(12 - 6 * x + 0.5)),
        plateau_growth=clamp(0.015 - 0.01 * x, 0.003, 0.015),
        early_seat_friction=clamp(0.02 + 0.08 * x, 0.02, 0.10),
    )

# backend/app/planner/earnings.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Literal

from .assumptions import (
    DISRUPTION_PROB_BOUNDS,
    DISRUPTION_SEVERITY,
    EARLY_FRICTION_YEARS,
    INPUT_BOUNDS,
    POST_PLATEAU_BOOST_WEIGHT,
    POST_PLATEAU_GROWTH_BOUNDS,
    PRE_PLATEAU_GROWTH_BOUNDS,
    SCENARIO_MULTIPLIERS,
)
from .dampeners import compression_dampeners
from .parsers import clamp


ScenarioId = Literal["bull", "base", "compression"]


@dataclass(frozen=True)
class EarningsYear:
    year: int
    gross_income: float
    growth_applied: float
    disruption_prob: float
    expected_disruption_penalty: float
    early_friction: float


@dataclass(frozen=True)
class GrowthPath:
    pre_plateau: float
    post_plateau: float
    plateau_year: int
    disruption_prob: float
    early_friction: float


def scenario_multipliers(scenario: str) -> dict:
    try:
        return SCENARIO_MULTIPLIERS[scenario]
    except KeyError:
        raise ValueError(f"Unknown scenario: {scenario!r}") from None


def growth_path(base_growth: float, exposure: float, scenario: str) -> GrowthPath:
    """Resolve the scenario-adjusted growth and penalty parameters."""
    scen = scenario_multipliers(scenario)
    damp = compression_dampeners(exposure)
    g = clamp(float(base_growth), *INPUT_BOUNDS["salaryGrowth"])

    pre = clamp(
        g * (1 - damp.growth_haircut) * (1 + scen["growthBoost"]),
        *PRE_PLATEAU_GROWTH_BOUNDS,
    )
    post = clamp(
        damp.plateau_growth * (1 + scen["growthBoost"] * POST_PLATEAU_BOOST_WEIGHT),
        *POST_PLATEAU_GROWTH_BOUNDS,
    )
    p_disrupt = clamp(
        damp.annual_disruption_prob * scen["disruptionMult"],
        *DISRUPTION_PROB_BOUNDS,
    )

    return GrowthPath(
        pre_plateau=pre,
        post_plateau=post,
        plateau_year=damp.plateau_year,
        disruption_prob=p_disrupt,
        early_friction=damp.early_seat_friction * scen["frictionMult"],
    )


def iter_earnings(
    years: int,
    start_salary: float,
    base_growth: float,
    exposure: float,
    scenario: ScenarioId = "base",
) -> Iterator[EarningsYear]:
    """
    Yield the expected earnings for career years 1..years.

    Growth compounds on the unpenalised salary; the disruption penalty is an
    expected value (hazard x severity), not a sampled event. Early seat
    friction only applies in the first few years. Each call starts over.
    """
    path = growth_path(base_growth, exposure, scenario)
    salary = max(0.0, float(start_salary))
    penalty = path.disruption_prob * DISRUPTION_SEVERITY

    for y in range(1, years + 1):
        growth = path.pre_plateau if y <= path.plateau_year else path.post_plateau
        friction = path.early_friction if y <= EARLY_FRICTION_YEARS else 0.0

        salary = salary * (1 + growth)
        expected = salary * (1 - penalty) * (1 - friction)

        yield EarningsYear(
            year=y,
            gross_income=expected,
            growth_applied=growth,
            disruption_prob=path.disruption_prob,
            expected_disruption_penalty=penalty,
            early_friction=friction,
        )


def project_earnings(
    years: int,
    start_salary: float,
    base_growth: float,
    exposure: float,
    scenario: ScenarioId = "base",
) -> List[EarningsYear]:
    return list(iter_earnings(years, start_salary, base_growth, exposure, scenario))

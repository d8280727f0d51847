# backend/app/planner/education.py
from __future__ import annotations

from dataclasses import dataclass

from .assumptions import INPUT_BOUNDS
from .emi import AmortizationSchedule, build_amortization
from .parsers import clamp


@dataclass(frozen=True)
class EducationCost:
    years_in_school: int
    tuition_per_year: float
    living_per_year: float
    scholarship_per_year: float
    total_direct_cost: float
    debt: AmortizationSchedule

    @property
    def net_cost_per_year(self) -> float:
        return self.tuition_per_year + self.living_per_year - self.scholarship_per_year


def education_cost_model(
    years_in_school: int,
    tuition_per_year: float,
    living_per_year: float,
    scholarship_per_year: float,
    debt_principal: float,
    debt_apr: float,
    repay_years: int,
) -> EducationCost:
    years = int(clamp(int(years_in_school), *INPUT_BOUNDS["yearsInSchool"]))
    tuition = max(0.0, float(tuition_per_year))
    living = max(0.0, float(living_per_year))
    schol = max(0.0, float(scholarship_per_year))

    # Not floored: a scholarship larger than the bill shows up as a negative cost.
    total_direct_cost = years * (tuition + living - schol)

    return EducationCost(
        years_in_school=years,
        tuition_per_year=tuition,
        living_per_year=living,
        scholarship_per_year=schol,
        total_direct_cost=total_direct_cost,
        debt=build_amortization(debt_principal, debt_apr, repay_years),
    )

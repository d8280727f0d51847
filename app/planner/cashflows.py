# backend/app/planner/cashflows.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Optional, Sequence, Tuple

from .education import EducationCost
from .earnings import EarningsYear
from .emi import debt_payment_for_year

Phase = Literal["school", "career"]

SCHOOL_NOTE = "Education + living cost (net of scholarships)"


@dataclass(frozen=True)
class CashflowYear:
    year_index: int
    phase: Phase
    gross_income: float
    after_tax_income: float
    debt_payment: float
    living_cost: float
    net_cashflow: float
    growth_applied: Optional[float] = None
    disruption_prob: Optional[float] = None
    early_friction: Optional[float] = None
    notes: Optional[str] = None


def school_phase(edu: EducationCost) -> List[CashflowYear]:
    # Floored at zero, unlike EducationCost.total_direct_cost.
    cf = -max(0.0, edu.net_cost_per_year)
    return [
        CashflowYear(
            year_index=y,
            phase="school",
            gross_income=0.0,
            after_tax_income=0.0,
            debt_payment=0.0,
            living_cost=0.0,
            net_cashflow=cf,
            notes=SCHOOL_NOTE,
        )
        for y in range(1, edu.years_in_school + 1)
    ]


def career_phase(
    edu: EducationCost,
    earnings: Sequence[EarningsYear],
    tax_rate: float,
    living_after_grad: float,
) -> List[CashflowYear]:
    rows: List[CashflowYear] = []
    for row in earnings:
        gross = row.gross_income
        after_tax = gross * (1 - tax_rate)
        pay_debt = debt_payment_for_year(edu.debt, row.year)
        net = after_tax - pay_debt - living_after_grad

        rows.append(
            CashflowYear(
                year_index=edu.years_in_school + row.year,
                phase="career",
                gross_income=gross,
                after_tax_income=after_tax,
                debt_payment=pay_debt,
                living_cost=living_after_grad,
                net_cashflow=net,
                growth_applied=row.growth_applied,
                disruption_prob=row.disruption_prob,
                early_friction=row.early_friction,
            )
        )
    return rows


def assemble_cashflows(
    edu: EducationCost,
    earnings: Sequence[EarningsYear],
    tax_rate: float,
    living_after_grad: float,
) -> Tuple[CashflowYear, ...]:
    """School years first, then career years, on one 1-based timeline."""
    return tuple(school_phase(edu) + career_phase(edu, earnings, tax_rate, living_after_grad))

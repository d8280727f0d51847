# backend/app/planner/emi.py
from __future__ import annotations

from dataclasses import dataclass

from .assumptions import INPUT_BOUNDS
from .parsers import clamp


@dataclass(frozen=True)
class AmortizationSchedule:
    principal: float
    apr: float
    repay_years: int
    payment_monthly: float
    payment_annual: float
    total_paid: float
    total_interest: float

    @property
    def months(self) -> int:
        return self.repay_years * 12


def monthly_payment(principal: float, apr: float, months: int) -> float:
    """
    Fixed monthly payment that retires `principal` over `months` at `apr`.
    M = P * r / (1 - (1+r)^-n), r = apr / 12
    """
    if principal == 0:
        return 0.0
    r = apr / 12.0
    if r == 0:
        return principal / months
    return principal * r / (1.0 - (1.0 + r) ** (-months))


def build_amortization(principal: float, apr: float, repay_years: int) -> AmortizationSchedule:
    principal = max(0.0, float(principal))
    apr = clamp(float(apr), *INPUT_BOUNDS["debtAPR"])
    years = int(clamp(int(repay_years), *INPUT_BOUNDS["repayYears"]))

    months = years * 12
    payment = monthly_payment(principal, apr, months)
    total_paid = payment * months

    return AmortizationSchedule(
        principal=principal,
        apr=apr,
        repay_years=years,
        payment_monthly=payment,
        payment_annual=payment * 12,
        total_paid=total_paid,
        # float residue at apr == 0 can land a hair below zero
        total_interest=max(0.0, total_paid - principal),
    )


def debt_payment_for_year(schedule: AmortizationSchedule, career_year: int) -> float:
    """Annual debt service owed in a 1-based career year."""
    if career_year <= schedule.repay_years:
        return schedule.payment_annual
    return 0.0

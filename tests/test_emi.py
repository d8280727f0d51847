import pytest

from app.planner.emi import build_amortization, debt_payment_for_year, monthly_payment
from app.planner.education import education_cost_model


@pytest.mark.parametrize("apr,years", [(0.0, 1), (0.065, 10), (0.25, 40)])
def test_zero_principal_means_zero_payment(apr, years):
    sched = build_amortization(0, apr, years)
    assert sched.payment_monthly == 0
    assert sched.payment_annual == 0
    assert sched.total_paid == 0
    assert sched.total_interest == 0


def test_zero_apr_is_straight_line():
    sched = build_amortization(60000, 0.0, 10)
    assert sched.payment_monthly == 60000 / 120
    assert sched.total_interest == 0


def test_known_payment():
    # 60k over 10 years at 6.5% is a textbook ~681.29/month
    sched = build_amortization(60000, 0.065, 10)
    assert sched.payment_monthly == pytest.approx(681.29, abs=0.01)
    assert sched.payment_annual == pytest.approx(sched.payment_monthly * 12)


@pytest.mark.parametrize(
    "principal,apr,years",
    [(60000, 0.065, 10), (12345.67, 0.0, 7), (250000, 0.25, 40), (1000, 0.01, 1)],
)
def test_total_paid_identities(principal, apr, years):
    sched = build_amortization(principal, apr, years)
    assert sched.total_paid == pytest.approx(sched.payment_monthly * years * 12)
    assert sched.total_interest == pytest.approx(sched.total_paid - principal, abs=1e-6)
    assert sched.total_interest >= 0


def test_terms_are_clamped():
    sched = build_amortization(-5, 0.9, 99)
    assert sched.principal == 0
    assert sched.apr == 0.25
    assert sched.repay_years == 40

    sched = build_amortization(1000, 0.05, 0)
    assert sched.repay_years == 1
    assert sched.months == 12


def test_monthly_payment_matches_formula():
    r = 0.05 / 12
    expected = 10000 * r / (1 - (1 + r) ** -60)
    assert monthly_payment(10000, 0.05, 60) == pytest.approx(expected)


def test_debt_payment_stops_after_term():
    sched = build_amortization(60000, 0.065, 10)
    assert debt_payment_for_year(sched, 1) == sched.payment_annual
    assert debt_payment_for_year(sched, 10) == sched.payment_annual
    assert debt_payment_for_year(sched, 11) == 0


def test_education_direct_cost_is_not_floored():
    edu = education_cost_model(4, 1000, 0, 5000, 0, 0.06, 10)
    assert edu.total_direct_cost == 4 * (1000 - 5000)


def test_education_years_clamped():
    assert education_cost_model(0, 0, 0, 0, 0, 0.06, 10).years_in_school == 1
    assert education_cost_model(14, 0, 0, 0, 0, 0.06, 10).years_in_school == 10

import pytest

from app.planner import metrics
from app.planner.cashflows import assemble_cashflows
from app.planner.earnings import project_earnings
from app.planner.education import education_cost_model


def test_npv_discounts_first_cashflow_one_period():
    assert metrics.npv([110.0], 0.10) == pytest.approx(100.0)
    assert metrics.npv([-100.0, 121.0], 0.10) == pytest.approx(-100 / 1.1 + 100)


def test_npv_zero_rate_is_plain_sum():
    assert metrics.npv([-5.0, 2.0, 4.0], 0.0) == pytest.approx(1.0)


@pytest.mark.parametrize(
    "flows",
    [
        [-1000.0, 300.0, 400.0, 500.0],
        [-46000.0] * 4 + [15000.0] * 30,
        [-100.0, 180.0],
    ],
)
def test_irr_zeroes_npv(flows):
    r = metrics.irr(flows)
    assert r is not None
    assert metrics.npv(flows, r) == pytest.approx(0.0, abs=1e-6)


def test_irr_known_value():
    # -100 then +110 one year later is exactly 10%
    assert metrics.irr([-100.0, 110.0]) == pytest.approx(0.10, abs=1e-9)


@pytest.mark.parametrize("flows", [[1.0, 2.0, 3.0], [-1.0, -2.0], [0.0, 0.0], []])
def test_irr_undefined_without_sign_change(flows):
    assert metrics.irr(flows) is None


def test_payback_year():
    assert metrics.payback_year([-10.0, 4.0, 5.0, 1.0, 3.0]) == 4
    assert metrics.payback_year([0.0, -1.0]) == 1
    assert metrics.payback_year([-10.0, 1.0, 1.0]) is None


def test_lifetime_totals_exclude_school_years():
    edu = education_cost_model(2, 10000, 5000, 0, 20000, 0.05, 5)
    earnings = project_earnings(10, 50000, 0.03, 4, "base")
    timeline = assemble_cashflows(edu, earnings, 0.2, 20000)

    assert metrics.lifetime_gross(timeline) == pytest.approx(sum(e.gross_income for e in earnings))
    career_net = [t.net_cashflow for t in timeline if t.phase == "career"]
    assert metrics.lifetime_net(timeline) == pytest.approx(sum(career_net))


def test_cashflow_timeline_layout():
    edu = education_cost_model(3, 20000, 10000, 5000, 40000, 0.06, 4)
    earnings = project_earnings(12, 60000, 0.04, 5, "base")
    timeline = assemble_cashflows(edu, earnings, 0.25, 30000)

    assert [t.year_index for t in timeline] == list(range(1, 16))
    assert [t.phase for t in timeline[:3]] == ["school"] * 3
    assert all(t.net_cashflow == -25000 for t in timeline[:3])

    career = timeline[3:]
    assert [t.debt_payment > 0 for t in career] == [True] * 4 + [False] * 8
    first = career[0]
    assert first.after_tax_income == pytest.approx(first.gross_income * 0.75)
    assert first.net_cashflow == pytest.approx(
        first.after_tax_income - edu.debt.payment_annual - 30000
    )


def test_school_cashflow_floored_when_scholarship_exceeds_cost():
    edu = education_cost_model(4, 1000, 0, 5000, 0, 0.06, 10)
    timeline = assemble_cashflows(edu, project_earnings(10, 40000, 0.02, 5), 0.2, 20000)
    school = [t for t in timeline if t.phase == "school"]
    assert all(t.net_cashflow == 0 for t in school)
    assert edu.total_direct_cost < 0

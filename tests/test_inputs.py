import math

import pytest

from app.planner.assumptions import DEFAULT_INPUTS
from app.planner.deterministic import InvalidConfigError, inputs_to_dict, resolve_inputs
from app.planner.parsers import money, parse_number, pct, round2


@pytest.mark.parametrize(
    "raw,expected",
    [
        (72000, 72000.0),
        ("72000", 72000.0),
        ("72,000", 72000.0),
        ("$72,000", 72000.0),
        ("72000 USD", 72000.0),
        ("72k", 72000.0),
        ("1.2m", 1200000.0),
        ("6.5%", 0.065),
        ("-3", -3.0),
        (" 0.07 ", 0.07),
    ],
)
def test_parse_number(raw, expected):
    assert parse_number(raw) == pytest.approx(expected)


@pytest.mark.parametrize("raw", [None, "", "   ", "abc", True, False, float("nan"), float("inf"), [], {}])
def test_parse_number_rejects_non_numbers(raw):
    assert parse_number(raw) is None


def test_money_rounds_half_up():
    assert money(2.5) == 3
    assert money(-2.5) == -2
    assert money(681.29) == 681
    assert money(float("nan")) == 0
    assert money(None) == 0


def test_round2_and_pct():
    assert round2(1.005 + 1e-9) == 1.01
    assert pct(0.0208) == 2.08
    assert pct(float("inf")) == 0.0


def test_empty_config_uses_defaults():
    inputs, warnings = resolve_inputs({})
    assert inputs_to_dict(inputs) == {k: v for k, v in DEFAULT_INPUTS.items()}
    assert len(warnings) == len(DEFAULT_INPUTS)
    assert "Missing taxRate (assumed 0.22)." in warnings


def test_none_config_uses_defaults():
    inputs, _ = resolve_inputs(None)
    assert inputs.career_horizon_years == 30
    assert inputs.automation_exposure == 5.0


@pytest.mark.parametrize("raw", [[1, 2], "yearsInSchool=4", 42, (("taxRate", 0.2),)])
def test_non_mapping_config_rejected(raw):
    with pytest.raises(InvalidConfigError):
        resolve_inputs(raw)


def test_invalid_values_fall_back_with_warning():
    inputs, warnings = resolve_inputs({"taxRate": "lots", "discountRate": None})
    assert inputs.tax_rate == 0.22
    assert inputs.discount_rate == 0.07
    assert "Invalid taxRate='lots' (assumed 0.22)." in warnings
    assert "Missing discountRate (assumed 0.07)." in warnings


def test_explicit_zero_is_honored():
    inputs, warnings = resolve_inputs({"debtAPR": 0, "taxRate": 0, "automationExposure": 0})
    assert inputs.debt_apr == 0
    assert inputs.tax_rate == 0
    assert inputs.automation_exposure == 0
    assert not any("debtAPR" in w for w in warnings)


def test_values_are_clamped():
    inputs, warnings = resolve_inputs(
        {
            "yearsInSchool": 15,
            "repayYears": 0,
            "careerHorizonYears": 5,
            "automationExposure": 12,
            "taxRate": 0.9,
            "discountRate": 0.5,
            "salaryGrowth": -0.1,
            "tuitionPerYear": -100,
        }
    )
    assert inputs.years_in_school == 10
    assert inputs.repay_years == 1
    assert inputs.career_horizon_years == 10
    assert inputs.automation_exposure == 10
    assert inputs.tax_rate == 0.6
    assert inputs.discount_rate == 0.25
    assert inputs.salary_growth == 0
    assert inputs.tuition_per_year == 0
    assert "yearsInSchool clamped to 10." in warnings
    assert "taxRate clamped to 0.6." in warnings


def test_integer_fields_truncate():
    inputs, _ = resolve_inputs({"yearsInSchool": 4.9, "repayYears": "12.7", "careerHorizonYears": 29.99})
    assert inputs.years_in_school == 4
    assert inputs.repay_years == 12
    assert inputs.career_horizon_years == 29
    assert isinstance(inputs.years_in_school, int)


def test_legacy_keys():
    inputs, warnings = resolve_inputs({"yearsCareer": 25, "aiExposure10": 8})
    assert inputs.career_horizon_years == 25
    assert inputs.automation_exposure == 8
    assert not any("careerHorizonYears" in w for w in warnings)


def test_canonical_key_beats_legacy():
    inputs, _ = resolve_inputs({"automationExposure": 2, "aiExposure10": 9})
    assert inputs.automation_exposure == 2


def test_string_inputs():
    inputs, warnings = resolve_inputs({"startSalary": "$85k", "debtAPR": "6.5%"})
    assert inputs.start_salary == pytest.approx(85000)
    assert inputs.debt_apr == pytest.approx(0.065)
    assert not any("startSalary" in w for w in warnings)


def test_resolved_values_are_finite():
    inputs, _ = resolve_inputs({"startSalary": float("inf"), "taxRate": float("nan")})
    assert all(math.isfinite(v) for v in inputs_to_dict(inputs).values())

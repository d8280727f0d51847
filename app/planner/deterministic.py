# backend/app/planner/deterministic.py
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from .assumptions import (
    DEFAULT_INPUTS,
    INPUT_BOUNDS,
    INTEGER_FIELDS,
    LEGACY_INPUT_KEYS,
)
from .parsers import clamp, money, parse_number, pct, round2

if TYPE_CHECKING:
    from .cashflows import CashflowYear
    from .engine import ModelResult, ScenarioResult

REPORT_VERSION = "roi-report-v1"


class InvalidConfigError(ValueError):
    """The configuration is not shaped like a field -> value record."""


@dataclass(frozen=True)
class RoiInputs:
    years_in_school: int = DEFAULT_INPUTS["yearsInSchool"]
    tuition_per_year: float = DEFAULT_INPUTS["tuitionPerYear"]
    living_per_year: float = DEFAULT_INPUTS["livingPerYear"]
    scholarship_per_year: float = DEFAULT_INPUTS["scholarshipPerYear"]
    debt_principal: float = DEFAULT_INPUTS["debtPrincipal"]
    debt_apr: float = DEFAULT_INPUTS["debtAPR"]
    repay_years: int = DEFAULT_INPUTS["repayYears"]
    start_salary: float = DEFAULT_INPUTS["startSalary"]
    salary_growth: float = DEFAULT_INPUTS["salaryGrowth"]
    tax_rate: float = DEFAULT_INPUTS["taxRate"]
    living_after_grad: float = DEFAULT_INPUTS["livingAfterGrad"]
    discount_rate: float = DEFAULT_INPUTS["discountRate"]
    career_horizon_years: int = DEFAULT_INPUTS["careerHorizonYears"]
    automation_exposure: float = DEFAULT_INPUTS["automationExposure"]


# payload key -> RoiInputs attribute
FIELD_MAP = {
    "yearsInSchool": "years_in_school",
    "tuitionPerYear": "tuition_per_year",
    "livingPerYear": "living_per_year",
    "scholarshipPerYear": "scholarship_per_year",
    "debtPrincipal": "debt_principal",
    "debtAPR": "debt_apr",
    "repayYears": "repay_years",
    "startSalary": "start_salary",
    "salaryGrowth": "salary_growth",
    "taxRate": "tax_rate",
    "livingAfterGrad": "living_after_grad",
    "discountRate": "discount_rate",
    "careerHorizonYears": "career_horizon_years",
    "automationExposure": "automation_exposure",
}


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _is_blank(v: Any) -> bool:
    return v is None or (isinstance(v, str) and v.strip() == "")


def _fmt(v: float) -> str:
    return f"{v:g}"


def _resolve_value(raw: Mapping, key: str) -> Tuple[Optional[float], Any]:
    """Canonical key first, then any legacy aliases. Returns (parsed, raw_value)."""
    raw_value = raw.get(key)
    parsed = parse_number(raw_value)
    if parsed is not None:
        return parsed, raw_value
    for legacy in LEGACY_INPUT_KEYS.get(key, []):
        alt = parse_number(raw.get(legacy))
        if alt is not None:
            return alt, raw.get(legacy)
    return None, raw_value


def resolve_inputs(raw: Any) -> Tuple[RoiInputs, List[str]]:
    """
    Coerce a raw configuration mapping into RoiInputs.

    Missing or non-numeric fields fall back to DEFAULT_INPUTS and values
    outside INPUT_BOUNDS are clamped; both cases add a warning. Only a
    configuration that is not a mapping at all is rejected.
    """
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise InvalidConfigError(
            f"Configuration must be an object of field -> number, got {type(raw).__name__}"
        )

    warnings: List[str] = []
    values: Dict[str, Any] = {}

    for key, attr in FIELD_MAP.items():
        default = DEFAULT_INPUTS[key]
        parsed, raw_value = _resolve_value(raw, key)

        if parsed is None:
            if _is_blank(raw_value):
                warnings.append(f"Missing {key} (assumed {_fmt(default)}).")
            else:
                warnings.append(f"Invalid {key}={raw_value!r} (assumed {_fmt(default)}).")
            values[attr] = default
            continue

        if key in INTEGER_FIELDS:
            parsed = int(parsed)

        lo, hi = INPUT_BOUNDS[key]
        bounded = clamp(parsed, lo, hi)
        if bounded != parsed:
            warnings.append(f"{key} clamped to {_fmt(bounded)}.")

        values[attr] = int(bounded) if key in INTEGER_FIELDS else float(bounded)

    return RoiInputs(**values), warnings


def inputs_to_dict(inputs: RoiInputs) -> Dict[str, Any]:
    data = asdict(inputs)
    return {key: data[attr] for key, attr in FIELD_MAP.items()}


# ---------- Serialization ----------

def _opt_pct(v: Optional[float]) -> Optional[float]:
    return round2(v * 100) if v else None


def _timeline_row_to_dict(t: "CashflowYear") -> Dict[str, Any]:
    return {
        "yearIndex": t.year_index,
        "phase": t.phase,
        "grossIncome": money(t.gross_income),
        "afterTaxIncome": money(t.after_tax_income),
        "debtPayment": money(t.debt_payment),
        "livingCost": money(t.living_cost),
        "netCashflow": money(t.net_cashflow),
        "disruptionProbPct": _opt_pct(t.disruption_prob),
        "growthPct": _opt_pct(t.growth_applied),
        "earlyFrictionPct": _opt_pct(t.early_friction),
        "notes": t.notes,
    }


def _scenario_to_dict(s: "ScenarioResult") -> Dict[str, Any]:
    return {
        "scenario": s.scenario,
        "label": s.label,
        "paybackYear": s.payback_year,
        "npv": money(s.npv),
        "irrPct": None if s.irr is None else round2(s.irr * 100),
        "lifetimeGross": money(s.lifetime_gross),
        "lifetimeNet": money(s.lifetime_net),
        "timeline": [_timeline_row_to_dict(t) for t in s.timeline],
    }


def build_roi_report(result: "ModelResult") -> Dict[str, Any]:
    """Round and rename a ModelResult into the public camelCase payload."""
    edu = result.edu
    debt = edu.debt
    damp = result.methodology.dampeners

    return {
        "meta": {
            "reportVersion": REPORT_VERSION,
            "generatedAt": _now_iso(),
            "source": "deterministic",
        },
        "inputs": inputs_to_dict(result.inputs),
        "edu": {
            "yearsInSchool": edu.years_in_school,
            "totalDirectCost": money(edu.total_direct_cost),
            "debt": {
                "principal": money(debt.principal),
                "apr": round2(debt.apr),
                "repayYears": debt.repay_years,
                "paymentMonthly": money(debt.payment_monthly),
                "paymentAnnual": money(debt.payment_annual),
                "totalPaid": money(debt.total_paid),
                "totalInterest": money(debt.total_interest),
            },
        },
        "methodology": {
            "discountRate": result.methodology.discount_rate,
            "taxRate": result.methodology.tax_rate,
            "automationExposure": result.methodology.automation_exposure,
            "dampeners": {
                "annualDisruptionProbPct": pct(damp.annual_disruption_prob),
                "growthHaircutPct": pct(damp.growth_haircut),
                "plateauYear": damp.plateau_year,
                "plateauGrowthPct": pct(damp.plateau_growth),
                "earlySeatFrictionPct": pct(damp.early_seat_friction),
            },
            "notes": list(result.methodology.notes),
        },
        "primaryScenario": result.primary_scenario,
        "scenarios": [_scenario_to_dict(s) for s in result.scenarios],
        "warnings": list(result.warnings),
    }

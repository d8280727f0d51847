import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from .assumptions import (
    FRAGILE_PAYBACK_SLACK_YEARS,
    LABEL_DEFAULT,
    LABEL_FRAGILE,
    LABEL_MISPRICED,
    LABEL_STRONG,
    METHODOLOGY_NOTES,
    MISPRICED_EXPOSURE_MIN,
    MISPRICED_NPV_MAX,
    PRIMARY_SCENARIO,
    SCENARIO_ORDER,
    STRONG_NPV_MIN,
    STRONG_PAYBACK_SLACK_YEARS,
)
from .cashflows import CashflowYear, assemble_cashflows
from .dampeners import Dampeners, compression_dampeners
from .deterministic import RoiInputs, build_roi_report, inputs_to_dict, resolve_inputs
from .earnings import iter_earnings
from .education import EducationCost, education_cost_model
from . import metrics

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScenarioResult:
    scenario: str
    label: str
    payback_year: Optional[int]
    npv: float
    irr: Optional[float]
    lifetime_gross: float
    lifetime_net: float
    timeline: Tuple[CashflowYear, ...]

    @property
    def cashflows(self) -> List[float]:
        return [t.net_cashflow for t in self.timeline]


@dataclass(frozen=True)
class Methodology:
    discount_rate: float
    tax_rate: float
    automation_exposure: float
    dampeners: Dampeners
    notes: Tuple[str, ...] = tuple(METHODOLOGY_NOTES)


@dataclass(frozen=True)
class ModelResult:
    inputs: RoiInputs
    edu: EducationCost
    scenarios: Tuple[ScenarioResult, ...]
    methodology: Methodology
    warnings: Tuple[str, ...] = field(default_factory=tuple)
    primary_scenario: str = PRIMARY_SCENARIO

    def scenario(self, scenario_id: str) -> ScenarioResult:
        for s in self.scenarios:
            if s.scenario == scenario_id:
                return s
        raise KeyError(scenario_id)

    @property
    def primary(self) -> ScenarioResult:
        return self.scenario(self.primary_scenario)


# ---------- Classification ----------

@dataclass(frozen=True)
class LabelContext:
    npv: float
    payback_year: Optional[int]
    years_in_school: int
    automation_exposure: float


LabelRule = Tuple[Callable[[LabelContext], bool], str]

# Order matters: every rule that matches overwrites the label before it.
LABEL_RULES: Tuple[LabelRule, ...] = (
    (
        lambda c: c.npv > STRONG_NPV_MIN
        and c.payback_year is not None
        and c.payback_year <= c.years_in_school + STRONG_PAYBACK_SLACK_YEARS,
        LABEL_STRONG,
    ),
    (
        lambda c: c.npv < 0
        or (c.payback_year is not None and c.payback_year > c.years_in_school + FRAGILE_PAYBACK_SLACK_YEARS),
        LABEL_FRAGILE,
    ),
    (
        lambda c: c.automation_exposure >= MISPRICED_EXPOSURE_MIN and c.npv < MISPRICED_NPV_MAX,
        LABEL_MISPRICED,
    ),
)


def classify(ctx: LabelContext, rules: Tuple[LabelRule, ...] = LABEL_RULES) -> str:
    label = LABEL_DEFAULT
    for predicate, candidate in rules:
        if predicate(ctx):
            label = candidate
    return label


# ---------- Scenario runner ----------

def run_scenario(inputs: RoiInputs, edu: EducationCost, scenario: str) -> ScenarioResult:
    earnings = list(
        iter_earnings(
            inputs.career_horizon_years,
            inputs.start_salary,
            inputs.salary_growth,
            inputs.automation_exposure,
            scenario,
        )
    )
    timeline = assemble_cashflows(edu, earnings, inputs.tax_rate, inputs.living_after_grad)
    cashflows = [t.net_cashflow for t in timeline]

    v = metrics.npv(cashflows, inputs.discount_rate)
    r = metrics.irr(cashflows)
    payback = metrics.payback_year(cashflows)

    label = classify(
        LabelContext(
            npv=v,
            payback_year=payback,
            years_in_school=edu.years_in_school,
            automation_exposure=inputs.automation_exposure,
        )
    )

    logger.debug(
        "scenario=%s npv=%.2f irr=%s payback=%s label=%s",
        scenario, v, r, payback, label,
    )

    return ScenarioResult(
        scenario=scenario,
        label=label,
        payback_year=payback,
        npv=v,
        irr=r,
        lifetime_gross=metrics.lifetime_gross(timeline),
        lifetime_net=metrics.lifetime_net(timeline),
        timeline=timeline,
    )


def run_model(config: Any) -> ModelResult:
    """
    Run all scenarios for one configuration.

    `config` is either a RoiInputs or a raw mapping of payload keys. Both go
    through resolve_inputs, so out-of-range values are clamped with a warning
    (raises InvalidConfigError when the configuration is not a mapping).
    """
    if isinstance(config, RoiInputs):
        # typed inputs still go through the same clamps as raw payloads
        config = inputs_to_dict(config)
    inputs, warnings = resolve_inputs(config)

    edu = education_cost_model(
        years_in_school=inputs.years_in_school,
        tuition_per_year=inputs.tuition_per_year,
        living_per_year=inputs.living_per_year,
        scholarship_per_year=inputs.scholarship_per_year,
        debt_principal=inputs.debt_principal,
        debt_apr=inputs.debt_apr,
        repay_years=inputs.repay_years,
    )

    scenarios = tuple(run_scenario(inputs, edu, sid) for sid in SCENARIO_ORDER)

    methodology = Methodology(
        discount_rate=inputs.discount_rate,
        tax_rate=inputs.tax_rate,
        automation_exposure=inputs.automation_exposure,
        dampeners=compression_dampeners(inputs.automation_exposure),
    )

    return ModelResult(
        inputs=inputs,
        edu=edu,
        scenarios=scenarios,
        methodology=methodology,
        warnings=tuple(warnings),
    )


def generate_roi_report(config: Any) -> Dict[str, Any]:
    return build_roi_report(run_model(config))

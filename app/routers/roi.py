# backend/app/routers/roi.py
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, HTTPException

from app.planner.assumptions import (
    FRAGILE_PAYBACK_SLACK_YEARS,
    LABEL_DEFAULT,
    LABEL_FRAGILE,
    LABEL_MISPRICED,
    LABEL_STRONG,
    MISPRICED_EXPOSURE_MIN,
    MISPRICED_NPV_MAX,
    PRIMARY_SCENARIO,
    SCENARIO_MULTIPLIERS,
    SCENARIO_ORDER,
    STRONG_NPV_MIN,
    STRONG_PAYBACK_SLACK_YEARS,
)
from app.planner.benchmarks import benchmark_tables, build_preset_config
from app.planner.deterministic import InvalidConfigError
from app.planner.engine import generate_roi_report
from models import PresetRequest, PresetResponse, RoiResponse

router = APIRouter(tags=["roi"])
logger = logging.getLogger(__name__)


def _run_report(config: Any) -> Dict[str, Any]:
    try:
        return generate_roi_report(config)
    except InvalidConfigError as e:
        logger.warning("Rejected ROI configuration: %s", e)
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/roi", response_model=RoiResponse)
def roi_run(body: Optional[Dict[str, Any]] = Body(default=None)):
    # An empty body means "all defaults"
    config = body if body is not None else {}
    report = _run_report(config)

    primary = next(
        (s for s in report["scenarios"] if s["scenario"] == report["primaryScenario"]),
        None,
    )
    logger.info(
        "ROI run: exposure=%s primary npv=%s label=%s warnings=%d",
        report["inputs"]["automationExposure"],
        primary["npv"] if primary else None,
        primary["label"] if primary else None,
        len(report["warnings"]),
    )
    return {"ok": True, "result": report}


@router.get("/roi/benchmarks")
def roi_benchmarks():
    return {"ok": True, **benchmark_tables()}


@router.get("/roi/scenarios")
def roi_scenarios():
    return {
        "ok": True,
        "order": list(SCENARIO_ORDER),
        "primary": PRIMARY_SCENARIO,
        "multipliers": SCENARIO_MULTIPLIERS,
        "labelRules": [
            {"label": LABEL_DEFAULT, "when": "always (starting label)"},
            {
                "label": LABEL_STRONG,
                "when": f"npv > {STRONG_NPV_MIN:.0f} and paybackYear <= yearsInSchool + {STRONG_PAYBACK_SLACK_YEARS}",
            },
            {
                "label": LABEL_FRAGILE,
                "when": f"npv < 0 or paybackYear > yearsInSchool + {FRAGILE_PAYBACK_SLACK_YEARS}",
            },
            {
                "label": LABEL_MISPRICED,
                "when": f"automationExposure >= {MISPRICED_EXPOSURE_MIN:g} and npv < {MISPRICED_NPV_MAX:.0f}",
            },
        ],
        "labelRuleSemantics": "Rules are evaluated in order; the last matching rule wins.",
    }


@router.post("/roi/preset", response_model=PresetResponse)
def roi_preset(req: PresetRequest):
    config, picks, notes = build_preset_config(
        major=req.major,
        city=req.city,
        school_type=req.schoolType,
        lifestyle=req.lifestyle,
    )
    if req.overrides:
        config = {**config, **req.overrides}

    report = _run_report(config)
    logger.info("ROI preset: major=%s city=%s notes=%d", picks["major"], picks["city"], len(notes))
    return {
        "ok": True,
        "picks": picks,
        "notes": notes,
        "inputs": config,
        "result": report,
    }

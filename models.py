from typing import Optional, List, Dict, Any, Literal
from pydantic import BaseModel


class PresetRequest(BaseModel):
    major: Optional[str] = None
    city: Optional[str] = None
    schoolType: Optional[str] = None
    lifestyle: Optional[str] = None
    # Raw field -> value overrides applied on top of the preset
    overrides: Optional[Dict[str, Any]] = None


class ReportMeta(BaseModel):
    reportVersion: str
    generatedAt: str
    source: str

    class Config:
        extra = "forbid"


class DebtSummary(BaseModel):
    principal: int
    apr: float
    repayYears: int
    paymentMonthly: int
    paymentAnnual: int
    totalPaid: int
    totalInterest: int

    class Config:
        extra = "forbid"


class EducationSummary(BaseModel):
    yearsInSchool: int
    totalDirectCost: int
    debt: DebtSummary

    class Config:
        extra = "forbid"


class DampenerSummary(BaseModel):
    annualDisruptionProbPct: float
    growthHaircutPct: float
    plateauYear: int
    plateauGrowthPct: float
    earlySeatFrictionPct: float

    class Config:
        extra = "forbid"


class Methodology(BaseModel):
    discountRate: float
    taxRate: float
    automationExposure: float
    dampeners: DampenerSummary
    notes: List[str]

    class Config:
        extra = "forbid"


class TimelineRow(BaseModel):
    yearIndex: int
    phase: Literal["school", "career"]
    grossIncome: int
    afterTaxIncome: int
    debtPayment: int
    livingCost: int
    netCashflow: int
    disruptionProbPct: Optional[float] = None
    growthPct: Optional[float] = None
    earlyFrictionPct: Optional[float] = None
    notes: Optional[str] = None

    class Config:
        extra = "forbid"


class ScenarioSummary(BaseModel):
    scenario: Literal["bull", "base", "compression"]
    label: str
    paybackYear: Optional[int] = None
    npv: int
    irrPct: Optional[float] = None
    lifetimeGross: int
    lifetimeNet: int
    timeline: List[TimelineRow]

    class Config:
        extra = "forbid"


class RoiReport(BaseModel):
    meta: ReportMeta
    inputs: Dict[str, Any]
    edu: EducationSummary
    methodology: Methodology
    primaryScenario: str
    scenarios: List[ScenarioSummary]
    warnings: List[str]

    class Config:
        extra = "forbid"


class RoiResponse(BaseModel):
    ok: bool = True
    result: RoiReport


class PresetResponse(BaseModel):
    ok: bool = True
    picks: Dict[str, str]
    notes: List[str]
    inputs: Dict[str, Any]
    result: RoiReport

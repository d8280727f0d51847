# backend/app/planner/assumptions.py

# Fallbacks used when an input field is missing or not numeric.
DEFAULT_INPUTS = {
    "yearsInSchool": 4,
    "tuitionPerYear": 0.0,
    "livingPerYear": 0.0,
    "scholarshipPerYear": 0.0,
    "debtPrincipal": 0.0,
    "debtAPR": 0.06,
    "repayYears": 10,
    "startSalary": 70000.0,
    "salaryGrowth": 0.04,
    "taxRate": 0.22,
    "livingAfterGrad": 35000.0,
    "discountRate": 0.07,
    "careerHorizonYears": 30,
    "automationExposure": 5.0,
}

# (min, max); None means unbounded on that side.
INPUT_BOUNDS = {
    "yearsInSchool": (1, 10),
    "tuitionPerYear": (0.0, None),
    "livingPerYear": (0.0, None),
    "scholarshipPerYear": (0.0, None),
    "debtPrincipal": (0.0, None),
    "debtAPR": (0.0, 0.25),
    "repayYears": (1, 40),
    "startSalary": (0.0, None),
    "salaryGrowth": (0.0, 0.2),
    "taxRate": (0.0, 0.6),
    "livingAfterGrad": (0.0, None),
    "discountRate": (0.0, 0.25),
    "careerHorizonYears": (10, 45),
    "automationExposure": (0.0, 10.0),
}

INTEGER_FIELDS = {"yearsInSchool", "repayYears", "careerHorizonYears"}

# Older clients post these names.
LEGACY_INPUT_KEYS = {
    "careerHorizonYears": ["yearsCareer"],
    "automationExposure": ["aiExposure10"],
}

SCENARIO_ORDER = ("bull", "base", "compression")
PRIMARY_SCENARIO = "base"

SCENARIO_MULTIPLIERS = {
    "bull": {"growthBoost": 0.35, "disruptionMult": 0.75, "frictionMult": 0.70},
    "base": {"growthBoost": 0.0, "disruptionMult": 1.0, "frictionMult": 1.0},
    "compression": {"growthBoost": -0.25, "disruptionMult": 1.35, "frictionMult": 1.25},
}

# Share of a year's earnings lost when a disruption event hits.
DISRUPTION_SEVERITY = 0.18
EARLY_FRICTION_YEARS = 3
POST_PLATEAU_BOOST_WEIGHT = 0.4

PRE_PLATEAU_GROWTH_BOUNDS = (-0.02, 0.18)
POST_PLATEAU_GROWTH_BOUNDS = (0.0, 0.08)
DISRUPTION_PROB_BOUNDS = (0.005, 0.08)

IRR_BRACKET = (-0.9, 1.5)
IRR_ITERATIONS = 80

LABEL_DEFAULT = "Moderate return"
LABEL_STRONG = "Strong return"
LABEL_FRAGILE = "Fragile under compression"
LABEL_MISPRICED = "Structurally mispriced (high compression risk)"

STRONG_NPV_MIN = 400000.0
STRONG_PAYBACK_SLACK_YEARS = 7
FRAGILE_PAYBACK_SLACK_YEARS = 12
MISPRICED_EXPOSURE_MIN = 8.0
MISPRICED_NPV_MAX = 150000.0

METHODOLOGY_NOTES = [
    "This models expected cashflows under task compression: slower wage growth, earlier plateau, and mild disruption probability.",
    "It is NOT a prediction of job extinction. It is a capital allocation lens under automation pressure.",
    "Change assumptions (tax rate, growth rate, living costs, discount rate) to match your reality.",
]

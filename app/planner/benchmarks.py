# backend/app/planner/benchmarks.py
#
# Reference tables for building a configuration from a (major, city, school
# type, lifestyle) choice. Tuition is driven by school type and track, not
# by major; majors drive the earnings curve and automation exposure.
from __future__ import annotations

import re
from typing import Any, Dict, List, Optional, Tuple

MAJORS: List[Dict[str, Any]] = [
    {
        "key": "Accounting (BS)",
        "track": "UG",
        "yearsInSchoolDefault": 4,
        "startSalary": 65000,
        "growth": 0.038,
        "automationExposure": 6,
        "plateauYear": 18,
        "plateauGrowth": 0.018,
        "notes": "Stable demand, but junior layers are compressible. Upside comes from advisory, FP&A, controls ownership, and domain depth.",
    },
    {
        "key": "Finance (BS)",
        "track": "UG",
        "yearsInSchoolDefault": 4,
        "startSalary": 75000,
        "growth": 0.040,
        "automationExposure": 6,
        "plateauYear": 18,
        "plateauGrowth": 0.018,
        "notes": "Output-per-head is rising fast. Winners move into judgment-heavy investing, client trust, or niche domain execution.",
    },
    {
        "key": "Computer Science (BS)",
        "track": "UG",
        "yearsInSchoolDefault": 4,
        "startSalary": 95000,
        "growth": 0.045,
        "automationExposure": 7,
        "plateauYear": 16,
        "plateauGrowth": 0.020,
        "notes": "High leverage field. Routine coding compresses; advantage shifts to architecture, product sense, reliability, and ownership.",
    },
    {
        "key": "Data / Analytics (BS/MS)",
        "track": "UG",
        "yearsInSchoolDefault": 4,
        "startSalary": 90000,
        "growth": 0.045,
        "automationExposure": 7,
        "plateauYear": 16,
        "plateauGrowth": 0.020,
        "notes": "Value shifts from dashboards to decision systems, experimentation, and causal thinking.",
    },
    {
        "key": "Nursing (BSN)",
        "track": "UG",
        "yearsInSchoolDefault": 4,
        "startSalary": 82000,
        "growth": 0.040,
        "automationExposure": 3,
        "plateauYear": 20,
        "plateauGrowth": 0.020,
        "notes": "Embodiment and liability create resistance. Automation helps with documentation and triage; core work stays physical.",
    },
    {
        "key": "Mechanical Engineering (BS)",
        "track": "UG",
        "yearsInSchoolDefault": 4,
        "startSalary": 78000,
        "growth": 0.040,
        "automationExposure": 5,
        "plateauYear": 18,
        "plateauGrowth": 0.018,
        "notes": "Moderate automation. Value remains where constraints meet reality: manufacturing, safety, systems integration.",
    },
    {
        "key": "Law (JD)",
        "track": "LAW",
        "yearsInSchoolDefault": 3,
        "startSalary": 95000,
        "growth": 0.035,
        "automationExposure": 6,
        "plateauYear": 18,
        "plateauGrowth": 0.015,
        "notes": "Research and drafting compress, but liability and client trust protect higher-end work.",
    },
    {
        "key": "Medicine (MD)",
        "track": "MED",
        "yearsInSchoolDefault": 4,
        "startSalary": 240000,
        "growth": 0.030,
        "automationExposure": 2,
        "plateauYear": 22,
        "plateauGrowth": 0.015,
        "notes": "High liability plus embodiment is a strong moat. Reimbursement and regulation shape outcomes.",
    },
    {
        "key": "MBA (General)",
        "track": "MBA",
        "yearsInSchoolDefault": 2,
        "startSalary": 110000,
        "growth": 0.035,
        "automationExposure": 5,
        "plateauYear": 18,
        "plateauGrowth": 0.018,
        "notes": "Depends on role. Rewards operators who can scope problems, communicate decisions, and execute with leverage.",
    },
    {
        "key": "Education (BA/BS)",
        "track": "UG",
        "yearsInSchoolDefault": 4,
        "startSalary": 52000,
        "growth": 0.030,
        "automationExposure": 3,
        "plateauYear": 20,
        "plateauGrowth": 0.015,
        "notes": "Lesson planning and admin get assisted; in-person trust and classroom management remain resistant.",
    },
    {
        "key": "Psychology (BA/BS)",
        "track": "UG",
        "yearsInSchoolDefault": 4,
        "startSalary": 50000,
        "growth": 0.030,
        "automationExposure": 5,
        "plateauYear": 20,
        "plateauGrowth": 0.015,
        "notes": "Undergrad alone is often low return unless paired with a graduate pathway.",
    },
]

CITIES: List[Dict[str, Any]] = [
    {
        "key": "New York, NY",
        "salaryMult": 1.15,
        "livingSchool": 32000,
        "livingAfter": 46000,
        "taxRate": 0.30,
        "notes": "High cost, high opportunity density. Taxes + rent bite hard; comp must clear the bar.",
    },
    {
        "key": "San Francisco, CA",
        "salaryMult": 1.25,
        "livingSchool": 34000,
        "livingAfter": 52000,
        "taxRate": 0.32,
        "notes": "Very high housing costs. Strong top-end comp upside; base roles can feel squeezed.",
    },
    {
        "key": "Los Angeles, CA",
        "salaryMult": 1.10,
        "livingSchool": 28000,
        "livingAfter": 42000,
        "taxRate": 0.30,
        "notes": "High cost with wide variance by neighborhood. Comp dispersion is large.",
    },
    {
        "key": "Dallas, TX",
        "salaryMult": 0.95,
        "livingSchool": 22000,
        "livingAfter": 34000,
        "taxRate": 0.22,
        "notes": "Lower taxes and housing costs. Lower baseline comp; ROI can still be excellent.",
    },
    {
        "key": "Chicago, IL",
        "salaryMult": 1.00,
        "livingSchool": 24000,
        "livingAfter": 36000,
        "taxRate": 0.25,
        "notes": "Good middle ground: large market, moderate costs relative to NYC/SF.",
    },
]

SCHOOL_TYPES: List[Dict[str, Any]] = [
    {"key": "Community College (In-district avg)", "tuitionPerYear": 4000, "track": "UG"},
    {"key": "Public 4-year (In-State avg)", "tuitionPerYear": 11250, "track": "UG"},
    {"key": "Public 4-year (Out-of-State avg)", "tuitionPerYear": 29000, "track": "UG"},
    {"key": "Private Nonprofit 4-year (Avg)", "tuitionPerYear": 41000, "track": "UG"},
    {"key": "Private For-profit 4-year (Avg)", "tuitionPerYear": 20000, "track": "UG"},
    {"key": "MBA (Public program avg)", "tuitionPerYear": 35000, "track": "MBA"},
    {"key": "MBA (Private program avg)", "tuitionPerYear": 60000, "track": "MBA"},
    {"key": "Law School (Public resident avg)", "tuitionPerYear": 31500, "track": "LAW"},
    {"key": "Law School (Public non-resident avg)", "tuitionPerYear": 45000, "track": "LAW"},
    {"key": "Law School (Private avg)", "tuitionPerYear": 58000, "track": "LAW"},
    {"key": "Medical School (Public avg)", "tuitionPerYear": 44000, "track": "MED"},
    {"key": "Medical School (Private avg)", "tuitionPerYear": 66000, "track": "MED"},
]

LIFESTYLES: List[Dict[str, Any]] = [
    {"key": "Frugal", "livingMult": 0.82},
    {"key": "Normal", "livingMult": 1.0},
    {"key": "High", "livingMult": 1.25},
]

TRACK_DEFAULT_SCHOOL_TYPE = {
    "UG": "Public 4-year (In-State avg)",
    "LAW": "Law School (Public resident avg)",
    "MED": "Medical School (Public avg)",
    "MBA": "MBA (Public program avg)",
}

# First match wins, so the more specific programs come first.
MAJOR_KEYWORDS: List[Tuple[List[str], str]] = [
    (["medical", "med school", "doctor", "physician", "md"], "Medicine (MD)"),
    (["law", "jd", "attorney"], "Law (JD)"),
    (["mba", "business school"], "MBA (General)"),
    (["nursing", "bsn", "rn"], "Nursing (BSN)"),
    (["computer science", "cs", "software"], "Computer Science (BS)"),
    (["data", "analytics", "analyst"], "Data / Analytics (BS/MS)"),
    (["finance"], "Finance (BS)"),
    (["accounting", "cpa"], "Accounting (BS)"),
    (["mechanical", "mech eng"], "Mechanical Engineering (BS)"),
    (["education", "teacher"], "Education (BA/BS)"),
    (["psychology", "psych"], "Psychology (BA/BS)"),
]

_NORM_RE = re.compile(r"[^a-z0-9]+")


def _norm(s: Any) -> str:
    return _NORM_RE.sub(" ", str(s or "").lower()).strip()


def _find(table: List[Dict[str, Any]], key: Optional[str]) -> Optional[Dict[str, Any]]:
    for row in table:
        if row["key"] == key:
            return row
    return None


def pick_major(major: Optional[str]) -> Dict[str, Any]:
    """Exact key, else keyword match on free text, else the first major."""
    exact = _find(MAJORS, major)
    if exact:
        return exact
    t = _norm(major)
    if t:
        words = f" {t} "
        for keywords, key in MAJOR_KEYWORDS:
            # whole-word match so "cs" does not fire inside "physics"
            if any(f" {_norm(w)} " in words for w in keywords):
                return _find(MAJORS, key) or MAJORS[0]
    return MAJORS[0]


def pick_city(city: Optional[str]) -> Dict[str, Any]:
    return _find(CITIES, city) or CITIES[0]


def pick_lifestyle(lifestyle: Optional[str]) -> Dict[str, Any]:
    return _find(LIFESTYLES, lifestyle) or LIFESTYLES[1]


def resolve_school_type(major: Dict[str, Any], school_type: Optional[str]) -> Dict[str, Any]:
    """A school type whose track differs from the major's is swapped for the track default."""
    track = major.get("track") or "UG"
    selected = _find(SCHOOL_TYPES, school_type)
    if selected and selected["track"] == track:
        return selected
    corrected_key = TRACK_DEFAULT_SCHOOL_TYPE.get(track, TRACK_DEFAULT_SCHOOL_TYPE["UG"])
    return _find(SCHOOL_TYPES, corrected_key) or SCHOOL_TYPES[0]


def build_preset_config(
    major: Optional[str] = None,
    city: Optional[str] = None,
    school_type: Optional[str] = None,
    lifestyle: Optional[str] = None,
) -> Tuple[Dict[str, Any], Dict[str, Any], List[str]]:
    """
    Resolve benchmark picks into a raw configuration.

    Returns (config, picks, notes). `picks` echoes the resolved table keys;
    `notes` records every fallback or correction that was applied.
    """
    notes: List[str] = []

    m = pick_major(major)
    if major and m["key"] != major:
        notes.append(f"Major '{major}' matched to '{m['key']}'.")

    c = pick_city(city)
    if city and c["key"] != city:
        notes.append(f"Unknown city '{city}'; using '{c['key']}'.")

    life = pick_lifestyle(lifestyle)
    if lifestyle and life["key"] != lifestyle:
        notes.append(f"Unknown lifestyle '{lifestyle}'; using '{life['key']}'.")

    school = resolve_school_type(m, school_type)
    if school_type and school["key"] != school_type:
        notes.append(f"School type '{school_type}' does not fit track {m['track']}; using '{school['key']}'.")

    living_mult = life["livingMult"]
    config = {
        "yearsInSchool": m["yearsInSchoolDefault"],
        "tuitionPerYear": school["tuitionPerYear"],
        "livingPerYear": c["livingSchool"] * living_mult,
        "livingAfterGrad": c["livingAfter"] * living_mult,
        "startSalary": m["startSalary"] * c["salaryMult"],
        "salaryGrowth": m["growth"],
        "taxRate": c["taxRate"],
        "automationExposure": m["automationExposure"],
    }
    picks = {
        "major": m["key"],
        "track": m["track"],
        "city": c["key"],
        "schoolType": school["key"],
        "lifestyle": life["key"],
        "majorNotes": m["notes"],
        "cityNotes": c["notes"],
    }
    return config, picks, notes


def benchmark_tables() -> Dict[str, Any]:
    return {
        "majors": MAJORS,
        "cities": CITIES,
        "schoolTypes": SCHOOL_TYPES,
        "lifestyles": LIFESTYLES,
        "trackDefaultSchoolType": TRACK_DEFAULT_SCHOOL_TYPE,
    }

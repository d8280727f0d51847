import os
import sys

import pytest

# Ensure project root is on sys.path before imports
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


REFERENCE_CONFIG = {
    "yearsInSchool": 4,
    "tuitionPerYear": 28000,
    "livingPerYear": 20000,
    "scholarshipPerYear": 2000,
    "debtPrincipal": 60000,
    "debtAPR": 0.065,
    "repayYears": 10,
    "startSalary": 72000,
    "salaryGrowth": 0.045,
    "automationExposure": 6,
    "taxRate": 0.24,
    "livingAfterGrad": 36000,
    "careerHorizonYears": 30,
    "discountRate": 0.07,
}


@pytest.fixture
def reference_config():
    return dict(REFERENCE_CONFIG)

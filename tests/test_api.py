import pytest
from fastapi.testclient import TestClient

from main import app

pytestmark = pytest.mark.integration

client = TestClient(app)


def test_probes():
    assert client.get("/health").json() == {"ok": True}
    body = client.get("/").json()
    assert body["service"] == "skillroi-api"


def test_roi_reference(reference_config):
    res = client.post("/roi", json=reference_config)
    assert res.status_code == 200
    body = res.json()
    assert body["ok"] is True

    result = body["result"]
    assert result["primaryScenario"] == "base"
    assert [s["scenario"] for s in result["scenarios"]] == ["bull", "base", "compression"]
    base = result["scenarios"][1]
    assert base["paybackYear"] == 14
    assert base["label"] == "Moderate return"
    assert result["edu"]["debt"]["paymentMonthly"] == 681
    assert result["warnings"] == []


def test_roi_empty_body_uses_defaults():
    res = client.post("/roi")
    assert res.status_code == 200
    result = res.json()["result"]
    assert result["inputs"]["careerHorizonYears"] == 30
    assert len(result["warnings"]) == 14


def test_roi_tolerates_bad_fields():
    res = client.post("/roi", json={"taxRate": "n/a", "startSalary": "$80k", "aiExposure10": 9})
    assert res.status_code == 200
    result = res.json()["result"]
    assert result["inputs"]["taxRate"] == 0.22
    assert result["inputs"]["startSalary"] == 80000
    assert result["methodology"]["automationExposure"] == 9


@pytest.mark.parametrize("payload", [[1, 2, 3], "hello", 12])
def test_roi_rejects_non_object(payload):
    res = client.post("/roi", json=payload)
    assert res.status_code == 422


def test_roi_rejects_malformed_json():
    res = client.post("/roi", content=b"{not json", headers={"Content-Type": "application/json"})
    assert res.status_code == 422


def test_benchmarks_endpoint():
    body = client.get("/roi/benchmarks").json()
    assert body["ok"] is True
    assert {"majors", "cities", "schoolTypes", "lifestyles"} <= set(body)
    law = next(m for m in body["majors"] if m["key"] == "Law (JD)")
    assert (law["plateauYear"], law["plateauGrowth"]) == (18, 0.015)
    assert all(c["notes"] for c in body["cities"])


def test_scenarios_endpoint():
    body = client.get("/roi/scenarios").json()
    assert body["order"] == ["bull", "base", "compression"]
    assert body["multipliers"]["compression"]["growthBoost"] == -0.25
    assert body["labelRules"][-1]["label"] == "Structurally mispriced (high compression risk)"


def test_preset_endpoint():
    res = client.post(
        "/roi/preset",
        json={
            "major": "Law (JD)",
            "city": "Chicago, IL",
            "schoolType": "Public 4-year (In-State avg)",
            "overrides": {"debtPrincipal": 90000},
        },
    )
    assert res.status_code == 200
    body = res.json()
    assert body["picks"]["schoolType"] == "Law School (Public resident avg)"
    assert body["picks"]["cityNotes"].startswith("Good middle ground")
    assert body["inputs"]["tuitionPerYear"] == 31500
    assert body["inputs"]["debtPrincipal"] == 90000
    assert body["result"]["edu"]["yearsInSchool"] == 3
    assert body["result"]["edu"]["debt"]["principal"] == 90000
    assert body["notes"]

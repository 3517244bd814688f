"""Tests for the HTTP layer."""

from __future__ import annotations

from fastapi.testclient import TestClient

from fleet_calc.api.server import app

client = TestClient(app)


class TestMetaEndpoints:

    def test_health(self):
        assert client.get("/health").json() == {"status": "ok"}

    def test_root(self):
        body = client.get("/").json()
        assert body["name"] == "Company EV Fleet Cost Calculator API"

    def test_defaults(self):
        body = client.get("/scenario/defaults").json()
        assert body["company"]["employee_count"] == 20
        assert body["policy"]["vat_multiplier"] == 1.19

    def test_schema(self):
        schema = client.get("/schema").json()
        assert "vehicle" in schema["properties"]


class TestCompute:

    def test_defaults(self):
        resp = client.post("/compute", json={})
        assert resp.status_code == 200
        body = resp.json()
        assert body["result"]["point_estimate"]["total_annual"] == 166_953
        assert len(body["result"]["scaling_curve"]) == 39
        assert "FLEET COST" in body["narrative"]

    def test_partial_override(self):
        resp = client.post("/compute", json={"scenario": {"company": {"employee_count": 100}}})
        assert resp.json()["result"]["point_estimate"]["per_employee_annual"] == 6_588

    def test_clamped_input(self):
        resp = client.post("/compute", json={"scenario": {"company": {"employee_count": 0}}})
        assert resp.status_code == 200
        assert resp.json()["result"]["point_estimate"]["employee_count"] == 1

    def test_validation_error_is_422(self):
        resp = client.post("/compute", json={"scenario": {"vehicle": {"lease_term_months": 0}}})
        assert resp.status_code == 422

    def test_domain_error_is_422(self):
        resp = client.post(
            "/compute",
            json={"scenario": {"employee": {"standard_days": 0, "weekend_days": 0}}},
        )
        assert resp.status_code == 422
        assert "annual working hours" in resp.json()["detail"]

    def test_overflowing_input_is_422(self):
        resp = client.post("/compute", json={"scenario": {"infrastructure": {"depreciation_years": 1e-320}}})
        assert resp.status_code == 422
        assert "not finite" in resp.json()["detail"]

    def test_huge_employee_count_is_clamped(self):
        resp = client.post("/compute", json={"scenario": {"company": {"employee_count": 10**400}}})
        assert resp.status_code == 200
        assert resp.json()["result"]["point_estimate"]["employee_count"] == 1


    def test_narrative_endpoint(self):
        body = client.post("/compute/narrative", json={}).json()
        assert body["headline_metrics"]["per_employee_annual"] == 8_348
        assert body["headline_metrics"]["employee_savings"] == 6_739
        assert "RAISE VS. COMPANY CAR" in body["narrative"]

    def test_curve_csv(self):
        resp = client.post("/compute/curve.csv", json={})
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/csv")
        lines = resp.text.strip().splitlines()
        assert lines[0].startswith("employee_count,")
        assert len(lines) == 40

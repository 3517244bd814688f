"""Tests for api/narrative.py."""

from __future__ import annotations

from fleet_calc import compute_scenario
from fleet_calc.api.narrative import generate_narrative
from fleet_calc.config import CombustionConfig, Scenario


def test_sections_present(scenario: Scenario):
    text = generate_narrative(compute_scenario(scenario))
    for title in ("FLEET COST", "WORKING HOURS", "EMPLOYEE VS. PRIVATE COMBUSTION CAR",
                  "RAISE VS. COMPANY CAR"):
        assert title in text


def test_key_figures(scenario: Scenario):
    text = generate_narrative(compute_scenario(scenario))
    assert "Employees: 20" in text
    assert "€166,953" in text
    assert "Effective annual hours: 2,392.5" in text
    assert "SAVES €6,739" in text


def test_loss_wording(scenario: Scenario):
    free = CombustionConfig(
        lease_monthly=0, insurance_monthly=0, vehicle_tax_annual=0,
        fuel_consumption_l_per_100km=0, fuel_price_per_l=0, maintenance_annual=0,
    )
    text = generate_narrative(compute_scenario(scenario.model_copy(update={"combustion": free})))
    assert "LOSES €501" in text


def test_monthly_figures(scenario: Scenario):
    text = generate_narrative(compute_scenario(scenario))
    assert "€7,240 (€603/month)" in text      # 7240 / 12 = 603.33
    assert "€501 (€42/month;" in text         # 501 / 12 = 41.75
    assert "(€562/month) with the company car" in text   # 6739 / 12 = 561.58


def test_headline_shares(scenario: Scenario):
    text = generate_narrative(compute_scenario(scenario))
    # net wage 3131 / spend 8348
    assert "Only 37.5% of a raise reaches the employee" in text
    # (3170 + 4821) / 8348
    assert "95.7% is benefit" in text

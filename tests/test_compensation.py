"""Tests for engine/compensation.py: raise vs. company car."""

from __future__ import annotations

import pytest

from fleet_calc.config import CombustionConfig, EmployeeBasis, VehicleConfig
from fleet_calc.engine.combustion import compute_combustion_cost
from fleet_calc.engine.compensation import compute_car_path, compute_wage_path, compute_wage_vs_car
from fleet_calc.engine.fleet_cost import compute_point_estimate, compute_variable_costs
from fleet_calc.engine.working_hours import compute_working_hours
from fleet_calc.errors import DomainError


@pytest.fixture
def breakdown_inputs(vehicle, infra, company, combustion, basis, policy):
    variable = compute_variable_costs(vehicle, infra, policy)
    hours = compute_working_hours(basis)
    point = compute_point_estimate(company.employee_count, variable, hours, infra, company, policy)
    baseline = compute_combustion_cost(combustion, vehicle)
    return point, variable, baseline


# ═══════════════════════════════════════════════════════════════════════════
# Benefit in kind / employee savings
# ═══════════════════════════════════════════════════════════════════════════

def test_benefit_in_kind(breakdown_inputs, vehicle: VehicleConfig, basis: EmployeeBasis):
    wc = compute_wage_vs_car(*breakdown_inputs, vehicle, basis)
    # 34000 × 0.25% × 12 = 1020; × 35% = 357
    assert wc.benefit_in_kind_annual == 1_020
    assert wc.employee_tax_on_benefit == 357


def test_employee_car_cost_and_savings(breakdown_inputs, vehicle: VehicleConfig, basis: EmployeeBasis):
    wc = compute_wage_vs_car(*breakdown_inputs, vehicle, basis)
    # private electricity: 480 × 30% = 144
    assert wc.employee_electricity_cost == 144
    assert wc.employee_company_car_cost == 501
    # 7240 − 501
    assert wc.employee_savings == 6_739


def test_negative_savings_not_clamped(vehicle, infra, company, basis, policy):
    variable = compute_variable_costs(vehicle, infra, policy)
    hours = compute_working_hours(basis)
    point = compute_point_estimate(20, variable, hours, infra, company, policy)
    free_car = compute_combustion_cost(
        CombustionConfig(
            lease_monthly=0, insurance_monthly=0, vehicle_tax_annual=0,
            fuel_consumption_l_per_100km=0, fuel_price_per_l=0, maintenance_annual=0,
        ),
        vehicle,
    )
    wc = compute_wage_vs_car(point, variable, free_car, vehicle, basis)
    assert wc.employee_savings == -501


def test_overflowing_benefit_in_kind_is_domain_error(breakdown_inputs):
    # 1e308 × 100% × 12 months overflows
    with pytest.raises(DomainError) as exc:
        compute_wage_vs_car(
            *breakdown_inputs,
            VehicleConfig(gross_list_price=1e308),
            EmployeeBasis(benefit_in_kind_pct=100),
        )
    assert exc.value.quantity == "benefit_in_kind"



# ═══════════════════════════════════════════════════════════════════════════
# Cash-raise path
# ═══════════════════════════════════════════════════════════════════════════

def test_wage_path_defaults(basis: EmployeeBasis):
    w = compute_wage_path(8_348, basis)
    # gross = 8348 / 1.2 = 6956.67
    assert w.gross_wage == 6_957
    assert w.employer_social == 1_391
    assert w.employee_social == 1_391
    assert w.income_tax == 2_435         # 6956.67 × 35% = 2434.83
    assert w.net_wage == 3_131           # 6956.67 − 1391 − 2435


@pytest.mark.parametrize("spend", [0, 1, 999, 5_000.5, 8_348, 12_345, 100_001])
def test_wage_components_sum_to_spend(spend: float, basis: EmployeeBasis):
    w = compute_wage_path(spend, basis)
    assert abs(sum(w.components.values()) - spend) <= 1


def test_wage_path_no_social_contributions():
    basis = EmployeeBasis(employer_social_rate_pct=0, employee_social_rate_pct=0, employee_tax_rate_pct=0)
    w = compute_wage_path(10_000, basis)
    assert w.net_wage == 10_000
    assert w.employer_social == 0


# ═══════════════════════════════════════════════════════════════════════════
# Company-car path
# ═══════════════════════════════════════════════════════════════════════════

def test_car_path_defaults(breakdown_inputs, vehicle: VehicleConfig, basis: EmployeeBasis):
    wc = compute_wage_vs_car(*breakdown_inputs, vehicle, basis)
    car = wc.car
    assert car.employer_spend == 8_348
    assert car.car_value == 3_170       # 264.18 × 12
    assert car.employee_tax == 357
    assert car.extras == 4_821          # 8348 − 3170.16 − 357
    assert abs(sum(car.components.values()) - car.employer_spend) <= 1


def test_both_paths_share_employer_spend(breakdown_inputs, vehicle: VehicleConfig, basis: EmployeeBasis):
    point = breakdown_inputs[0]
    wc = compute_wage_vs_car(*breakdown_inputs, vehicle, basis)
    assert wc.wage.employer_spend == wc.car.employer_spend == point.per_employee_annual


def test_extras_floored_at_zero(vehicle, infra, policy):
    variable = compute_variable_costs(vehicle, infra, policy)
    # Benefit tax far above what the employer spends per head.
    car = compute_car_path(4_000, variable, employee_tax_on_benefit=10_000)
    assert car.extras == 0


def test_floor_does_not_affect_savings(vehicle, infra, company, combustion, policy):
    pricey = vehicle.model_copy(update={"gross_list_price": 1_000_000})
    basis = EmployeeBasis(benefit_in_kind_pct=1.0)
    variable = compute_variable_costs(pricey, infra, policy)
    hours = compute_working_hours(basis)
    point = compute_point_estimate(20, variable, hours, infra, company, policy)
    baseline = compute_combustion_cost(combustion, pricey)
    wc = compute_wage_vs_car(point, variable, baseline, pricey, basis)
    # bik 120000, tax 42000
    assert wc.car.extras == 0
    assert wc.employee_savings < 0

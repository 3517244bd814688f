"""Shared test fixtures: the reference scenario, spelled out field by field."""

from __future__ import annotations

import pytest

from fleet_calc.config import (
    CombustionConfig,
    CompanyConfig,
    EmployeeBasis,
    InfrastructureConfig,
    PolicyConfig,
    Scenario,
    VehicleConfig,
)
from fleet_calc.engine.orchestrator import clear_cache


@pytest.fixture(autouse=True)
def _fresh_cache():
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def vehicle() -> VehicleConfig:
    return VehicleConfig(
        name="VW ID.3 Pure",
        lease_net_monthly=222,
        lease_term_months=48,
        annual_mileage_km=10_000,
        delivery_fee=790,
        gross_list_price=34_000,
        consumption_kwh_per_100km=16,
    )


@pytest.fixture
def infra() -> InfrastructureConfig:
    return InfrastructureConfig(
        company_charger_cost=1_200,
        home_charger_cost=1_200,
        depreciation_years=5,
        electricity_price_per_kwh=0.30,
        charge_card_monthly=40,
        insurance_monthly=80,
    )


@pytest.fixture
def company() -> CompanyConfig:
    return CompanyConfig(
        employee_count=20,
        fleet_manager_salary=54_000,
        staffing_threshold=100,
        extra_staff_cost=40_000,
        employer_tax_rate_pct=45,
    )


@pytest.fixture
def combustion() -> CombustionConfig:
    return CombustionConfig(
        lease_monthly=350,
        insurance_monthly=100,
        vehicle_tax_annual=150,
        fuel_consumption_l_per_100km=7,
        fuel_price_per_l=1.70,
        maintenance_annual=500,
    )


@pytest.fixture
def basis() -> EmployeeBasis:
    return EmployeeBasis(
        employee_tax_rate_pct=35,
        employer_social_rate_pct=20,
        employee_social_rate_pct=20,
        private_electricity_share_pct=30,
        benefit_in_kind_pct=0.25,
        standard_days=220,
        hours_per_day=8,
        weekend_days=20,
        hours_per_weekend_day=5.5,
        weekend_surcharge_pct=50,
        overtime_allowance_pct=25,
    )


@pytest.fixture
def policy() -> PolicyConfig:
    return PolicyConfig()


@pytest.fixture
def scenario(
    vehicle: VehicleConfig,
    infra: InfrastructureConfig,
    company: CompanyConfig,
    combustion: CombustionConfig,
    basis: EmployeeBasis,
    policy: PolicyConfig,
) -> Scenario:
    return Scenario(
        vehicle=vehicle,
        infrastructure=infra,
        company=company,
        combustion=combustion,
        employee=basis,
        policy=policy,
    )

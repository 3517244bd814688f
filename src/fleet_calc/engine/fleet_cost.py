"""Per-employee fleet cost: variable rates, staffing step and point estimate.

Variable costs scale linearly with headcount.  Two fixed terms do not:
company charge points (one per ``employees_per_company_charge_point``
employees, rounded up) and fleet administration (one manager plus one extra
unit per full multiple of ``staffing_threshold``).
"""

from __future__ import annotations

import math

from fleet_calc.config.company import CompanyConfig
from fleet_calc.config.infrastructure import InfrastructureConfig
from fleet_calc.config.policy import PolicyConfig
from fleet_calc.config.vehicle import VehicleConfig
from fleet_calc.engine.rounding import require_finite, round_currency, round_cents
from fleet_calc.errors import DomainError
from fleet_calc.models.results import (
    AnnualWorkingHours,
    PerEmployeePointEstimate,
    VariableCostBreakdown,
)


def compute_variable_costs(
    vehicle: VehicleConfig,
    infra: InfrastructureConfig,
    policy: PolicyConfig,
) -> VariableCostBreakdown:
    """Annual cost per employee that does not depend on fleet size."""
    if vehicle.lease_term_months <= 0:
        raise DomainError("lease_term_months")
    if infra.depreciation_years <= 0:
        raise DomainError("depreciation_years")

    lease_gross_monthly = vehicle.lease_net_monthly * policy.vat_multiplier

    lease = lease_gross_monthly * 12
    # Delivery is a one-off, spread over the lease term.
    delivery = vehicle.delivery_fee / (vehicle.lease_term_months / 12)
    insurance = infra.insurance_monthly * 12
    home_charger = infra.home_charger_cost / infra.depreciation_years
    electricity = (
        vehicle.annual_mileage_km
        * (vehicle.consumption_kwh_per_100km / 100)
        * infra.electricity_price_per_kwh
    )
    charge_card = infra.charge_card_monthly * 12
    total = require_finite(
        "variable_cost", lease + delivery + insurance + home_charger + electricity + charge_card
    )

    return VariableCostBreakdown(
        lease_gross_monthly=lease_gross_monthly,
        lease=lease,
        delivery=delivery,
        insurance=insurance,
        home_charger=home_charger,
        electricity=electricity,
        charge_card=charge_card,
        total=total,
    )


def charge_points(employee_count: int, policy: PolicyConfig) -> int:
    """Company charge points needed for ``employee_count`` employees."""
    return math.ceil(employee_count / policy.employees_per_company_charge_point)


def staffing_cost(employee_count: int, company: CompanyConfig) -> float:
    """Fleet administration cost: a step function of headcount."""
    if company.staffing_threshold <= 0:
        raise DomainError("staffing_threshold")
    extra_units = employee_count // company.staffing_threshold
    return company.fleet_manager_salary + extra_units * company.extra_staff_cost


def compute_point_estimate(
    employee_count: int,
    variable: VariableCostBreakdown,
    hours: AnnualWorkingHours,
    infra: InfrastructureConfig,
    company: CompanyConfig,
    policy: PolicyConfig,
) -> PerEmployeePointEstimate:
    """Total, per-employee and hourly cost for one headcount.

    ``employee_count`` need not equal ``company.employee_count``; the scaling
    curve calls this for every sampled headcount.
    """
    if employee_count < 1:
        raise DomainError("employee_count", f"employee_count must be at least 1, got {employee_count}")
    if hours.annual_hours <= 0:
        raise DomainError("annual_hours", "annual working hours are zero; hourly rate is undefined")
    if infra.depreciation_years <= 0:
        raise DomainError("depreciation_years")

    points = charge_points(employee_count, policy)
    infra_annual = points * infra.company_charger_cost / infra.depreciation_years
    staffing = staffing_cost(employee_count, company)

    total = require_finite("total_annual", variable.total * employee_count + staffing + infra_annual)
    per_employee = total / employee_count
    hourly = require_finite("hourly_equivalent", per_employee / hours.annual_hours)

    after_tax = 1 - company.employer_tax_rate_pct / 100

    return PerEmployeePointEstimate(
        employee_count=employee_count,
        charge_points=points,
        infrastructure_annual=infra_annual,
        staffing_cost=staffing,
        total_annual=round_currency(total),
        total_annual_effective=round_currency(total * after_tax),
        per_employee_annual=round_currency(per_employee),
        hourly_equivalent=round_cents(hourly),
        hourly_equivalent_effective=round_cents(hourly * after_tax),
        highlighted=employee_count == company.employee_count,
    )

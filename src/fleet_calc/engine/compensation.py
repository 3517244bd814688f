"""Wage vs. company car: where an equal employer budget ends up.

Two views of the same per-employee employer spend:

  Cash raise:   spend = gross wage + employer social contribution
                gross wage = net + employee social + income tax

  Company car:  spend = lease value + employee's benefit-in-kind tax + extras

Plus the employee's own balance: combustion baseline minus what the company
car still costs them (benefit-in-kind tax + private electricity share).
"""

from __future__ import annotations

from fleet_calc.config.employee import EmployeeBasis
from fleet_calc.config.vehicle import VehicleConfig
from fleet_calc.engine.rounding import require_finite, round_currency
from fleet_calc.models.results import (
    CarPath,
    CombustionAnnualCost,
    PerEmployeePointEstimate,
    VariableCostBreakdown,
    WagePath,
    WageVsCarBreakdown,
)


def compute_wage_path(employer_spend: float, basis: EmployeeBasis) -> WagePath:
    """Split an employer budget into the four parts of a cash raise."""
    gross_wage = employer_spend / (1 + basis.employer_social_rate_pct / 100)
    employer_social = employer_spend - gross_wage
    employee_social = round_currency(gross_wage * basis.employee_social_rate_pct / 100)
    income_tax = round_currency(gross_wage * basis.employee_tax_rate_pct / 100)
    net_wage = round_currency(gross_wage - employee_social - income_tax)

    return WagePath(
        employer_spend=employer_spend,
        gross_wage=round_currency(gross_wage),
        employer_social=round_currency(employer_social),
        employee_social=employee_social,
        income_tax=income_tax,
        net_wage=net_wage,
    )


def compute_car_path(
    employer_spend: float,
    variable: VariableCostBreakdown,
    employee_tax_on_benefit: float,
) -> CarPath:
    """Split the same budget into lease value, employee tax and extras."""
    extras = round_currency(employer_spend - variable.lease - employee_tax_on_benefit)

    return CarPath(
        employer_spend=employer_spend,
        car_value=round_currency(variable.lease),
        employee_tax=round_currency(employee_tax_on_benefit),
        # Negative extras have no meaning in the stacked bar.
        extras=max(extras, 0.0),
    )


def compute_wage_vs_car(
    point: PerEmployeePointEstimate,
    variable: VariableCostBreakdown,
    combustion: CombustionAnnualCost,
    vehicle: VehicleConfig,
    basis: EmployeeBasis,
) -> WageVsCarBreakdown:
    """Compare a company car against a raise of equal employer cost.

    ``point`` must be the estimate for the company's own headcount; its
    per-employee figure is the employer spend both paths share.
    """
    benefit_in_kind = require_finite(
        "benefit_in_kind", vehicle.gross_list_price * (basis.benefit_in_kind_pct / 100) * 12
    )
    tax_on_benefit = benefit_in_kind * (basis.employee_tax_rate_pct / 100)
    electricity = variable.electricity * (basis.private_electricity_share_pct / 100)
    car_cost = require_finite("employee_company_car_cost", tax_on_benefit + electricity)

    # Not floored: a negative value means the company car costs the employee
    # more than running their own combustion car.
    savings = combustion.total - car_cost

    employer_spend = point.per_employee_annual

    return WageVsCarBreakdown(
        benefit_in_kind_annual=round_currency(benefit_in_kind),
        employee_tax_on_benefit=round_currency(tax_on_benefit),
        employee_electricity_cost=round_currency(electricity),
        employee_company_car_cost=round_currency(car_cost),
        employee_savings=round_currency(savings),
        wage=compute_wage_path(employer_spend, basis),
        car=compute_car_path(employer_spend, variable, tax_on_benefit),
    )

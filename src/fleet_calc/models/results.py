"""Result types: the contract between the engine and its consumers.

Every record is recomputed from scratch on each call to ``compute`` and is
never persisted.  Currency figures on the point estimate and on the
decomposition are already rounded to whole units; hourly figures to two
decimals.  Breakdown records keep full precision so consumers can derive
further figures without compounding rounding error.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class _Result(BaseModel):
    model_config = ConfigDict(frozen=True)


# ═══════════════════════════════════════════════════════════════════════════
# Derived rates
# ═══════════════════════════════════════════════════════════════════════════

class AnnualWorkingHours(_Result):
    """Effective annual hours: the denominator for hourly-wage equivalents."""

    base_hours: float
    """standard_days × hours_per_day."""

    weekend_hours_effective: float
    """weekend_days × hours_per_weekend_day × (1 + surcharge)."""

    overtime_hours: float
    """(base_hours + unweighted weekend hours) × overtime allowance.
    The surcharge is deliberately NOT part of this base."""

    annual_hours: float
    """base_hours + weekend_hours_effective + overtime_hours."""


class VariableCostBreakdown(_Result):
    """Per-employee annual cost that scales linearly with headcount."""

    lease_gross_monthly: float
    lease: float
    delivery: float
    insurance: float
    home_charger: float
    electricity: float
    charge_card: float
    total: float


# ═══════════════════════════════════════════════════════════════════════════
# Point estimate / scaling curve
# ═══════════════════════════════════════════════════════════════════════════

class PerEmployeePointEstimate(_Result):
    """Cost figures for one employee count."""

    employee_count: int
    charge_points: int
    infrastructure_annual: float
    """Company charge points written off per year (unrounded)."""
    staffing_cost: float
    """Fleet manager + extra administrative units (unrounded)."""

    total_annual: float
    total_annual_effective: float
    """total_annual after the employer's tax deduction."""
    per_employee_annual: float
    hourly_equivalent: float
    hourly_equivalent_effective: float

    highlighted: bool = False
    """True when this count is the company's configured headcount."""


ScalingCurvePoint = PerEmployeePointEstimate


# ═══════════════════════════════════════════════════════════════════════════
# Combustion baseline
# ═══════════════════════════════════════════════════════════════════════════

class CombustionAnnualCost(_Result):
    """What a privately run combustion car costs the employee per year."""

    lease: float
    insurance: float
    vehicle_tax: float
    fuel: float
    maintenance: float
    total: float


# ═══════════════════════════════════════════════════════════════════════════
# Wage vs company car
# ═══════════════════════════════════════════════════════════════════════════

class WagePath(_Result):
    """Equal-cost cash raise, split into who receives what."""

    employer_spend: float
    gross_wage: float
    employer_social: float
    employee_social: float
    income_tax: float
    net_wage: float

    @property
    def components(self) -> dict[str, float]:
        """Stacked-bar segments; sum to ``employer_spend`` within 1 unit."""
        return {
            "net_wage": self.net_wage,
            "employee_social": self.employee_social,
            "income_tax": self.income_tax,
            "employer_social": self.employer_social,
        }


class CarPath(_Result):
    """Same employer spend delivered as a company car."""

    employer_spend: float
    car_value: float
    """Gross lease value per year."""
    employee_tax: float
    """Income tax the employee pays on the benefit in kind."""
    extras: float
    """Insurance, electricity, charging, fleet admin.  Floored at zero."""

    @property
    def components(self) -> dict[str, float]:
        return {
            "car_value": self.car_value,
            "employee_tax": self.employee_tax,
            "extras": self.extras,
        }


class WageVsCarBreakdown(_Result):
    """Employee-side view of the company car vs. an equal-cost raise."""

    benefit_in_kind_annual: float
    employee_tax_on_benefit: float
    employee_electricity_cost: float
    employee_company_car_cost: float
    employee_savings: float
    """Combustion baseline minus company-car cost.  May be negative."""

    wage: WagePath
    car: CarPath


# ═══════════════════════════════════════════════════════════════════════════
# Top-level result
# ═══════════════════════════════════════════════════════════════════════════

class CostModelResult(_Result):
    """Everything one ``compute`` call produces."""

    scenario_name: str
    lease_gross_monthly: float
    working_hours: AnnualWorkingHours
    variable_costs: VariableCostBreakdown
    point_estimate: PerEmployeePointEstimate
    scaling_curve: tuple[ScalingCurvePoint, ...]
    combustion: CombustionAnnualCost
    wage_vs_car: WageVsCarBreakdown

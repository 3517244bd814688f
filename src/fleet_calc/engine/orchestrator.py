"""Cost-model entry point.

Data flow for one call:
  raw inputs → working hours + variable per-employee rates
  → point estimate (company headcount) + scaling curve
  → combustion baseline → wage-vs-car decomposition

``compute`` is pure.  Results are memoised on the full input tuple; every
input record is frozen and hashable, so any field change is a new key.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from fleet_calc.config.combustion import CombustionConfig
from fleet_calc.config.company import CompanyConfig
from fleet_calc.config.employee import EmployeeBasis
from fleet_calc.config.infrastructure import InfrastructureConfig
from fleet_calc.config.policy import PolicyConfig
from fleet_calc.config.scenario import Scenario
from fleet_calc.config.vehicle import VehicleConfig
from fleet_calc.engine.combustion import compute_combustion_cost
from fleet_calc.engine.compensation import compute_wage_vs_car
from fleet_calc.engine.fleet_cost import compute_point_estimate, compute_variable_costs
from fleet_calc.engine.rounding import round_cents
from fleet_calc.engine.scaling_curve import ScalingCurve
from fleet_calc.engine.working_hours import compute_working_hours
from fleet_calc.models.results import CostModelResult

logger = logging.getLogger(__name__)

CACHE_SIZE = 128


def compute(
    vehicle: VehicleConfig,
    infrastructure: InfrastructureConfig,
    company: CompanyConfig,
    combustion: CombustionConfig,
    employee_basis: EmployeeBasis,
    policy: PolicyConfig | None = None,
) -> CostModelResult:
    """Run the full cost model for one set of inputs.

    Raises ``DomainError`` when a denominator (headcount, lease term,
    depreciation period, annual hours) is zero.
    """
    return _compute_cached(
        vehicle, infrastructure, company, combustion, employee_basis,
        policy if policy is not None else PolicyConfig(),
    )


def compute_scenario(scenario: Scenario) -> CostModelResult:
    """``compute`` over a bundled ``Scenario``."""
    return compute(
        scenario.vehicle,
        scenario.infrastructure,
        scenario.company,
        scenario.combustion,
        scenario.employee,
        scenario.policy,
    )


def clear_cache() -> None:
    _compute_cached.cache_clear()


@lru_cache(maxsize=CACHE_SIZE)
def _compute_cached(
    vehicle: VehicleConfig,
    infrastructure: InfrastructureConfig,
    company: CompanyConfig,
    combustion: CombustionConfig,
    employee_basis: EmployeeBasis,
    policy: PolicyConfig,
) -> CostModelResult:
    logger.debug(
        "Computing cost model: vehicle=%r employees=%d curve=%d..%d/%d",
        vehicle.name, company.employee_count,
        policy.curve_start, policy.curve_stop, policy.curve_step,
    )

    hours = compute_working_hours(employee_basis)
    variable = compute_variable_costs(vehicle, infrastructure, policy)

    point = compute_point_estimate(
        company.employee_count, variable, hours, infrastructure, company, policy,
    )
    curve = tuple(ScalingCurve(variable, hours, infrastructure, company, policy))

    baseline = compute_combustion_cost(combustion, vehicle)
    breakdown = compute_wage_vs_car(point, variable, baseline, vehicle, employee_basis)

    logger.debug(
        "Point estimate: total=%.0f per_employee=%.0f hourly=%.2f (%d curve points)",
        point.total_annual, point.per_employee_annual, point.hourly_equivalent, len(curve),
    )

    return CostModelResult(
        scenario_name=vehicle.name,
        lease_gross_monthly=round_cents(variable.lease_gross_monthly),
        working_hours=hours,
        variable_costs=variable,
        point_estimate=point,
        scaling_curve=curve,
        combustion=baseline,
        wage_vs_car=breakdown,
    )

"""Engine: pure cost-model computation."""

from fleet_calc.engine.working_hours import compute_working_hours
from fleet_calc.engine.fleet_cost import (
    charge_points,
    compute_point_estimate,
    compute_variable_costs,
    staffing_cost,
)
from fleet_calc.engine.scaling_curve import ScalingCurve, curve_to_frame
from fleet_calc.engine.combustion import compute_combustion_cost
from fleet_calc.engine.compensation import compute_car_path, compute_wage_path, compute_wage_vs_car
from fleet_calc.engine.orchestrator import clear_cache, compute, compute_scenario

__all__ = [
    "compute_working_hours",
    "compute_variable_costs",
    "charge_points",
    "staffing_cost",
    "compute_point_estimate",
    "ScalingCurve",
    "curve_to_frame",
    "compute_combustion_cost",
    "compute_wage_path",
    "compute_car_path",
    "compute_wage_vs_car",
    "compute",
    "compute_scenario",
    "clear_cache",
]

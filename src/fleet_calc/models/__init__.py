"""Result models: computation output contracts."""

from fleet_calc.models.results import (
    AnnualWorkingHours,
    CarPath,
    CombustionAnnualCost,
    CostModelResult,
    PerEmployeePointEstimate,
    ScalingCurvePoint,
    VariableCostBreakdown,
    WagePath,
    WageVsCarBreakdown,
)

__all__ = [
    "AnnualWorkingHours",
    "CarPath",
    "CombustionAnnualCost",
    "CostModelResult",
    "PerEmployeePointEstimate",
    "ScalingCurvePoint",
    "VariableCostBreakdown",
    "WagePath",
    "WageVsCarBreakdown",
]

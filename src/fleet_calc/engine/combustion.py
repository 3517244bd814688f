"""Private combustion-vehicle baseline.

No staffing or infrastructure terms: the employee owns and runs the car.
"""

from __future__ import annotations

from fleet_calc.config.combustion import CombustionConfig
from fleet_calc.config.vehicle import VehicleConfig
from fleet_calc.engine.rounding import require_finite
from fleet_calc.models.results import CombustionAnnualCost


def compute_combustion_cost(combustion: CombustionConfig, vehicle: VehicleConfig) -> CombustionAnnualCost:
    """Annual cost of the combustion alternative at the fleet car's mileage."""
    lease = combustion.lease_monthly * 12
    insurance = combustion.insurance_monthly * 12
    fuel = (
        vehicle.annual_mileage_km
        * (combustion.fuel_consumption_l_per_100km / 100)
        * combustion.fuel_price_per_l
    )
    total = require_finite(
        "combustion_cost", lease + insurance + combustion.vehicle_tax_annual + fuel + combustion.maintenance_annual
    )

    return CombustionAnnualCost(
        lease=lease,
        insurance=insurance,
        vehicle_tax=combustion.vehicle_tax_annual,
        fuel=fuel,
        maintenance=combustion.maintenance_annual,
        total=total,
    )

"""Effective annual working hours.

Pure arithmetic: EmployeeBasis → AnnualWorkingHours.
"""

from __future__ import annotations

from fleet_calc.config.employee import EmployeeBasis
from fleet_calc.models.results import AnnualWorkingHours


def compute_working_hours(basis: EmployeeBasis) -> AnnualWorkingHours:
    """Combine regular, surcharged weekend and overtime-allowance hours."""

    base_hours = basis.standard_days * basis.hours_per_day

    # Weekend hours as they are actually worked, before any weighting.
    weekend_hours = basis.weekend_days * basis.hours_per_weekend_day
    weekend_hours_effective = weekend_hours * (1 + basis.weekend_surcharge_pct / 100)

    # Overtime allowance applies to unweighted hours only.
    overtime_hours = (base_hours + weekend_hours) * (basis.overtime_allowance_pct / 100)

    return AnnualWorkingHours(
        base_hours=base_hours,
        weekend_hours_effective=weekend_hours_effective,
        overtime_hours=overtime_hours,
        annual_hours=base_hours + weekend_hours_effective + overtime_hours,
    )

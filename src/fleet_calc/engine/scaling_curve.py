"""Scaling curve: point estimates over a range of employee counts.

``ScalingCurve`` is a lazy, finite iterable.  Every ``iter()`` starts a fresh
pass, so the same curve can be consumed more than once (table, then chart).
Points are independent of each other; ascending order only matters for the
chart x-axis.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import pandas as pd

from fleet_calc.config.company import CompanyConfig
from fleet_calc.config.infrastructure import InfrastructureConfig
from fleet_calc.config.policy import PolicyConfig
from fleet_calc.engine.fleet_cost import compute_point_estimate
from fleet_calc.errors import DomainError
from fleet_calc.models.results import (
    AnnualWorkingHours,
    ScalingCurvePoint,
    VariableCostBreakdown,
)


class ScalingCurve:
    """Sampled per-employee costs for ``policy.curve_start..curve_stop``."""

    def __init__(
        self,
        variable: VariableCostBreakdown,
        hours: AnnualWorkingHours,
        infra: InfrastructureConfig,
        company: CompanyConfig,
        policy: PolicyConfig,
    ):
        if policy.curve_step <= 0:
            raise DomainError("curve_step")
        self.variable = variable
        self.hours = hours
        self.infra = infra
        self.company = company
        self.policy = policy

    def employee_counts(self) -> range:
        p = self.policy
        return range(p.curve_start, p.curve_stop + 1, p.curve_step)

    def __len__(self) -> int:
        return len(self.employee_counts())

    def __iter__(self) -> Iterator[ScalingCurvePoint]:
        for n in self.employee_counts():
            yield compute_point_estimate(
                n, self.variable, self.hours, self.infra, self.company, self.policy,
            )


def curve_to_frame(points: Iterable[ScalingCurvePoint]) -> pd.DataFrame:
    """One row per sampled employee count, columns named after the point fields."""
    rows = [p.model_dump() for p in points]
    if not rows:
        return pd.DataFrame(columns=list(ScalingCurvePoint.model_fields))
    return pd.DataFrame(rows)

"""Company-side inputs: headcount, fleet administration, taxation."""

from pydantic import BaseModel, ConfigDict, Field


class CompanyConfig(BaseModel):
    """Employer parameters driving fixed fleet costs."""

    model_config = ConfigDict(frozen=True)

    employee_count: int = Field(default=20, ge=1, description="Employees with a company car")
    fleet_manager_salary: float = Field(
        default=54_000.0, ge=0,
        description="Annual fleet manager compensation incl. employer contributions (€)",
    )
    staffing_threshold: int = Field(
        default=100, ge=1,
        description="Each full multiple of this headcount adds one extra administrative unit",
    )
    extra_staff_cost: float = Field(default=40_000.0, ge=0, description="Annual cost per extra administrative unit (€)")
    employer_tax_rate_pct: float = Field(
        default=45.0, ge=0, le=100,
        description="Employer marginal tax rate (%). Costs are deductible, so the effective "
                    "burden is cost × (1 − rate).",
    )

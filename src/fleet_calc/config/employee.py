"""Employee-side tax, social-contribution and working-time assumptions."""

from pydantic import BaseModel, ConfigDict, Field


class EmployeeBasis(BaseModel):
    """Everything needed to turn employer spend into employee net and hourly figures.

    Working time feeds the effective-annual-hours denominator; the rates feed the
    gross-to-net split of a cash raise and the benefit-in-kind taxation of the car.
    """

    model_config = ConfigDict(frozen=True)

    # --- Taxes and contributions ---
    employee_tax_rate_pct: float = Field(
        default=35.0, ge=0, le=100,
        description="Employee marginal income tax rate incl. solidarity surcharge (%)",
    )
    employer_social_rate_pct: float = Field(default=20.0, ge=0, le=100, description="Employer social-contribution share (%)")
    employee_social_rate_pct: float = Field(default=20.0, ge=0, le=100, description="Employee social-contribution share (%)")
    private_electricity_share_pct: float = Field(
        default=30.0, ge=0, le=100,
        description="Share of the car's electricity used privately and paid by the employee (%)",
    )
    benefit_in_kind_pct: float = Field(
        default=0.25, ge=0, le=100,
        description="Monthly taxable benefit as % of gross list price "
                    "(EV 0.25 | hybrid 0.5 | combustion 1.0).",
    )

    # --- Working time ---
    standard_days: float = Field(default=220.0, ge=0, description="Regular working days per year")
    hours_per_day: float = Field(default=8.0, ge=0, description="Hours per regular working day")
    weekend_days: float = Field(default=20.0, ge=0, description="Extra Saturdays worked per year")
    hours_per_weekend_day: float = Field(default=5.5, ge=0, description="Hours per Saturday")
    weekend_surcharge_pct: float = Field(default=50.0, ge=0, description="Surcharge on Saturday hours (%)")
    overtime_allowance_pct: float = Field(
        default=25.0, ge=0,
        description="Allowance applied to all unweighted hours worked (%)",
    )

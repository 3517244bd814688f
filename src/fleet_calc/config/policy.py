"""Policy constants baked into the cost model, exposed for auditing."""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_VAT_MULTIPLIER = 1.19
DEFAULT_EMPLOYEES_PER_CHARGE_POINT = 2


class PolicyConfig(BaseModel):
    """Model assumptions that are not user inputs in everyday use.

    ``vat_multiplier`` converts net lease rates to gross; the charge-point ratio
    sets how many employees share one company charge point.  The ``curve_*``
    fields define the employee counts sampled for the scaling curve
    (inclusive of ``curve_stop`` when it falls on the step grid).
    """

    model_config = ConfigDict(frozen=True)

    vat_multiplier: float = Field(default=DEFAULT_VAT_MULTIPLIER, ge=1.0, description="Net-to-gross VAT factor")
    employees_per_company_charge_point: int = Field(
        default=DEFAULT_EMPLOYEES_PER_CHARGE_POINT, ge=1,
        description="Employees sharing one company charge point",
    )
    curve_start: int = Field(default=20, ge=1, description="First sampled employee count")
    curve_stop: int = Field(default=400, ge=1, description="Last sampled employee count (inclusive)")
    curve_step: int = Field(default=10, ge=1, description="Distance between sampled employee counts")

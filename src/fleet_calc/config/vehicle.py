"""Vehicle configuration: the leased fleet EV."""

from pydantic import BaseModel, ConfigDict, Field


class VehicleConfig(BaseModel):
    """One company car model, identical for every employee in the fleet."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="VW ID.3 Pure", description="Human label for this vehicle")
    lease_net_monthly: float = Field(default=222.0, ge=0, description="Monthly lease rate excluding VAT (€)")
    lease_term_months: int = Field(default=48, gt=0, description="Lease contract term (months)")
    annual_mileage_km: float = Field(default=10_000.0, ge=0, description="Distance driven per vehicle per year (km)")
    delivery_fee: float = Field(default=790.0, ge=0, description="One-time delivery charge per vehicle (€)")
    gross_list_price: float = Field(
        default=34_000.0, ge=0,
        description="Gross list price: the basis for the monthly benefit-in-kind percentage (€)",
    )
    consumption_kwh_per_100km: float = Field(default=16.0, ge=0, description="Energy consumption (kWh/100 km)")

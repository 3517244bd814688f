"""Private combustion-vehicle baseline the employee would otherwise pay for."""

from pydantic import BaseModel, ConfigDict, Field


class CombustionConfig(BaseModel):
    """Costs of a privately run combustion car. Mileage comes from VehicleConfig."""

    model_config = ConfigDict(frozen=True)

    lease_monthly: float = Field(default=350.0, ge=0, description="Monthly lease or financing rate (€)")
    insurance_monthly: float = Field(default=100.0, ge=0, description="Private comprehensive insurance (€/month)")
    vehicle_tax_annual: float = Field(default=150.0, ge=0, description="Annual vehicle tax (€)")
    fuel_consumption_l_per_100km: float = Field(default=7.0, ge=0, description="Fuel consumption (l/100 km)")
    fuel_price_per_l: float = Field(default=1.70, ge=0, description="Fuel price (€/l)")
    maintenance_annual: float = Field(default=500.0, ge=0, description="Servicing and wear parts (€/year)")

"""Charging infrastructure and running-cost inputs."""

from pydantic import BaseModel, ConfigDict, Field


class InfrastructureConfig(BaseModel):
    """Charge points, electricity and per-vehicle monthly fees."""

    model_config = ConfigDict(frozen=True)

    company_charger_cost: float = Field(
        default=1_200.0, ge=0,
        description="Unit cost of one charge point on company premises (€). "
                    "Shared by several employees, see PolicyConfig.",
    )
    home_charger_cost: float = Field(default=1_200.0, ge=0, description="Wallbox installed at each employee's home (€)")
    depreciation_years: float = Field(default=5.0, gt=0, description="Write-off period for charge points (years)")
    electricity_price_per_kwh: float = Field(default=0.30, ge=0, description="Company electricity tariff (€/kWh)")
    charge_card_monthly: float = Field(default=40.0, ge=0, description="Public charging card flat fee per vehicle (€/month)")
    insurance_monthly: float = Field(default=80.0, ge=0, description="Fleet insurance premium per vehicle (€/month)")

"""Top-level scenario: bundles all five input groups plus policy."""

from pydantic import BaseModel, ConfigDict, Field

from fleet_calc.config.vehicle import VehicleConfig
from fleet_calc.config.infrastructure import InfrastructureConfig
from fleet_calc.config.company import CompanyConfig
from fleet_calc.config.combustion import CombustionConfig
from fleet_calc.config.employee import EmployeeBasis
from fleet_calc.config.policy import PolicyConfig


class Scenario(BaseModel):
    """Complete input bundle for one computation."""

    model_config = ConfigDict(frozen=True)

    vehicle: VehicleConfig = Field(default_factory=VehicleConfig)
    infrastructure: InfrastructureConfig = Field(default_factory=InfrastructureConfig)
    company: CompanyConfig = Field(default_factory=CompanyConfig)
    combustion: CombustionConfig = Field(default_factory=CombustionConfig)
    employee: EmployeeBasis = Field(default_factory=EmployeeBasis)
    policy: PolicyConfig = Field(default_factory=PolicyConfig)

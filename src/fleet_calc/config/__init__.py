"""Configuration models: the five input groups plus policy constants."""

from fleet_calc.config.vehicle import VehicleConfig
from fleet_calc.config.infrastructure import InfrastructureConfig
from fleet_calc.config.company import CompanyConfig
from fleet_calc.config.combustion import CombustionConfig
from fleet_calc.config.employee import EmployeeBasis
from fleet_calc.config.policy import (
    DEFAULT_EMPLOYEES_PER_CHARGE_POINT,
    DEFAULT_VAT_MULTIPLIER,
    PolicyConfig,
)
from fleet_calc.config.scenario import Scenario

__all__ = [
    "VehicleConfig",
    "InfrastructureConfig",
    "CompanyConfig",
    "CombustionConfig",
    "EmployeeBasis",
    "PolicyConfig",
    "DEFAULT_VAT_MULTIPLIER",
    "DEFAULT_EMPLOYEES_PER_CHARGE_POINT",
    "Scenario",
]

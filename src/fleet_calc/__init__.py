"""Company EV fleet cost calculator."""

from fleet_calc.engine.orchestrator import compute, compute_scenario

__version__ = "1.0.0"

__all__ = ["compute", "compute_scenario", "__version__"]

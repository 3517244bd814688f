"""FastAPI server: HTTP access to the fleet cost model.

Run with:
    uvicorn fleet_calc.api.server:app --reload --port 8000

Or:
    python -m fleet_calc.api.server

Endpoints:
    GET  /health             : liveness probe
    GET  /                   : welcome + pointers
    GET  /schema             : full JSON Schema for Scenario inputs
    GET  /scenario/defaults  : complete default scenario as JSON
    POST /compute            : run the model (partial or full Scenario)
    POST /compute/narrative  : run + plain-English interpretation
    POST /compute/curve.csv  : scaling curve as CSV
"""

from __future__ import annotations

import logging
import os
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field, ValidationError

from fleet_calc import __version__
from fleet_calc.api.inputs import build_scenario, get_default_scenario, get_scenario_schema
from fleet_calc.api.narrative import generate_narrative
from fleet_calc.config.scenario import Scenario
from fleet_calc.engine.orchestrator import compute_scenario
from fleet_calc.engine.scaling_curve import curve_to_frame
from fleet_calc.errors import DomainError
from fleet_calc.logging_config import setup_logging
from fleet_calc.models.results import CostModelResult

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Company EV Fleet Cost Calculator API",
    version=__version__,
    description=(
        "Estimate what a company electric-car fleet costs in total, per "
        "employee and per working hour, compare it with a private combustion "
        "car, and split an equal employer budget into raise vs. company car."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class ComputeRequest(BaseModel):
    """Request body for /compute. All fields optional; defaults used for missing ones."""
    scenario: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial or full Scenario JSON. Missing fields use defaults; "
                    "out-of-range numbers are clamped. "
                    "Example: {'company': {'employee_count': 150}, 'vehicle': {'lease_net_monthly': 300}}",
    )


class ComputeResponse(BaseModel):
    """Response from /compute."""
    result: dict[str, Any]
    narrative: str = ""


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _scenario_or_422(overrides: dict[str, Any]) -> Scenario:
    try:
        return build_scenario(overrides)
    except ValidationError as exc:
        logger.warning("Rejected scenario input: %d validation error(s)", exc.error_count())
        raise HTTPException(
            status_code=422,
            detail=exc.errors(include_url=False, include_context=False),
        ) from exc


def _compute_or_422(scenario: Scenario) -> CostModelResult:
    try:
        return compute_scenario(scenario)
    except DomainError as exc:
        logger.warning("Cost model domain error on %s: %s", exc.quantity, exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/")
def root():
    """API root: returns a welcome message and pointers."""
    return {
        "name": "Company EV Fleet Cost Calculator API",
        "version": __version__,
        "start_here": "GET /scenario/defaults",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/schema")
def get_schema():
    """Full JSON Schema for Scenario: all inputs with types, defaults, constraints."""
    return get_scenario_schema()


@app.get("/scenario/defaults")
def get_defaults():
    """Complete default Scenario as JSON. Use as a starting point for modifications."""
    return get_default_scenario()


@app.post("/compute", response_model=ComputeResponse)
def compute_endpoint(req: ComputeRequest):
    """Run the cost model.

    Send a partial Scenario (only the fields you want to change).
    Returns the full CostModelResult + narrative.
    """
    scenario = _scenario_or_422(req.scenario)
    result = _compute_or_422(scenario)
    return ComputeResponse(
        result=result.model_dump(),
        narrative=generate_narrative(result),
    )


@app.post("/compute/narrative")
def compute_narrative(req: ComputeRequest):
    """Run the model and return only the narrative plus headline figures."""
    scenario = _scenario_or_422(req.scenario)
    result = _compute_or_422(scenario)
    p = result.point_estimate
    return {
        "narrative": generate_narrative(result),
        "headline_metrics": {
            "total_annual": p.total_annual,
            "per_employee_annual": p.per_employee_annual,
            "hourly_equivalent": p.hourly_equivalent,
            "hourly_equivalent_effective": p.hourly_equivalent_effective,
            "employee_savings": result.wage_vs_car.employee_savings,
            "net_wage_equivalent": result.wage_vs_car.wage.net_wage,
        },
    }


@app.post("/compute/curve.csv", response_class=PlainTextResponse)
def compute_curve_csv(req: ComputeRequest):
    """Scaling curve as CSV, one row per sampled employee count."""
    scenario = _scenario_or_422(req.scenario)
    result = _compute_or_422(scenario)
    csv_text = curve_to_frame(result.scaling_curve).to_csv(index=False)
    return PlainTextResponse(csv_text, media_type="text/csv")


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn

    setup_logging(os.getenv("FLEET_CALC_LOG_LEVEL", "INFO"))
    uvicorn.run(
        "fleet_calc.api.server:app",
        host=os.getenv("FLEET_CALC_HOST", "0.0.0.0"),
        port=int(os.getenv("FLEET_CALC_PORT", "8000")),
    )


if __name__ == "__main__":
    main()

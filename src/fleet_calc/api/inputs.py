"""Input collection: clamping raw form / request values before validation.

The engine never clamps; it rejects.  This layer turns whatever a form or
HTTP client sends into values inside each field's numeric domain so that
only genuine domain errors (a zero divisor) reach the user as "invalid".

Rules, per field of each input group:
  - unparseable numbers become 0 (empty form fields)
  - negatives become 0
  - values above a field's ``le`` bound are clamped to it
  - ``employee_count`` is truncated to an int and clamped to ≥ 1
  - divisors (lease term, depreciation period, staffing threshold, curve
    step) are NOT lifted off zero, so a zero there fails validation
"""

from __future__ import annotations

import logging
import math
from typing import Any

from pydantic import BaseModel

from fleet_calc.config.scenario import Scenario

logger = logging.getLogger(__name__)

MIN_EMPLOYEES = 1


def get_default_scenario() -> dict:
    """Return default Scenario as a JSON-serializable dict."""
    return Scenario().model_dump()


def get_scenario_schema() -> dict:
    """Return the full JSON Schema for Scenario."""
    return Scenario.model_json_schema()


def build_scenario(overrides: dict[str, Any]) -> Scenario:
    """Build a Scenario from partial, unclamped overrides merged onto defaults.

    Raises ``pydantic.ValidationError`` for values clamping cannot repair.
    """
    defaults = get_default_scenario()
    _deep_merge(defaults, clamp_overrides(overrides))
    return Scenario(**defaults)


def clamp_overrides(overrides: dict[str, Any]) -> dict[str, Any]:
    """Clamp every known numeric field in a partial scenario dict.

    Unknown sections and fields pass through untouched; pydantic decides
    what to do with them.
    """
    clamped: dict[str, Any] = {}
    for section, values in overrides.items():
        field = Scenario.model_fields.get(section)
        if field is None or not isinstance(values, dict):
            clamped[section] = values
            continue
        clamped[section] = _clamp_section(field.annotation, values)
    return clamped


def _clamp_section(model_cls: type[BaseModel], values: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for name, raw in values.items():
        field_info = model_cls.model_fields.get(name)
        if field_info is None or field_info.annotation not in (int, float):
            out[name] = raw
            continue

        value = _to_number(raw)
        if value < 0:
            value = 0.0
        upper = _get_field_metadata(field_info, "le")
        if upper is not None and value > upper:
            value = float(upper)
        if name == "employee_count":
            value = max(float(MIN_EMPLOYEES), math.floor(value))

        if field_info.annotation is int:
            value = int(value)

        if value != raw:
            logger.debug("Clamped %s.%s: %r -> %r", model_cls.__name__, name, raw, value)
        out[name] = value
    return out


def _to_number(raw: Any) -> float:
    if isinstance(raw, bool):
        return float(raw)
    try:
        value = float(raw)
    except (TypeError, ValueError, OverflowError):
        # OverflowError: integers too large for a float
        return 0.0
    return value if math.isfinite(value) else 0.0


def _get_field_metadata(field_info: Any, attr: str) -> Any:
    """Extract constraint metadata from Pydantic field info."""
    if hasattr(field_info, "metadata"):
        for m in field_info.metadata:
            if hasattr(m, attr):
                return getattr(m, attr)
    return None


def _deep_merge(base: dict, overrides: dict) -> dict:
    """Recursively merge overrides into base dict."""
    for key, val in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(val, dict):
            _deep_merge(base[key], val)
        else:
            base[key] = val
    return base

"""Output-boundary rounding.

Half-up (not banker's) rounding so that x.5 always goes up, matching how the
figures are presented to users.  Only ever applied to final figures.
"""

from __future__ import annotations

import math

from fleet_calc.errors import DomainError


def require_finite(quantity: str, value: float) -> float:
    """Return ``value`` unchanged, or raise ``DomainError`` if it overflowed."""
    if not math.isfinite(value):
        raise DomainError(quantity, f"{quantity} is not finite; check the input magnitudes")
    return value


def round_currency(value: float) -> float:
    """Round to the nearest whole currency unit, halves up."""
    return float(math.floor(value + 0.5))


def round_cents(value: float) -> float:
    """Round to two decimals, halves up."""
    scaled = value * 100
    if math.isinf(scaled) and math.isfinite(value):
        # Too large to carry a fractional cent.
        return value
    return math.floor(scaled + 0.5) / 100

"""Exceptions raised by the cost model."""

from __future__ import annotations


class CostModelError(Exception):
    """Base class for all cost-model failures."""


class DomainError(CostModelError, ValueError):
    """A quantity the model must divide by is zero or otherwise undefined.

    Raised instead of returning ``NaN`` / ``Infinity`` so that consumers can
    show an "invalid input" state.  Always a deterministic function of the
    inputs; correcting the input clears it.
    """

    def __init__(self, quantity: str, message: str | None = None):
        self.quantity = quantity
        super().__init__(message or f"{quantity} must be positive to compute this figure")

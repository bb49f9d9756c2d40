"""Exceptions raised by the arc flash calculation engine."""

from typing import Any, Optional


class ArcFlashError(Exception):
    """Base class for all arcflash errors."""


class RangeError(ArcFlashError, ValueError):
    """An input or derived quantity lies outside the validated range of the model.

    IEEE 1584-2018 s4.2 "Range of model": applying the empirical equations
    outside these ranges gives incorrect results, so the calculation is
    refused rather than clamped.

    Attributes:
        quantity: Name of the offending quantity (e.g. "busbar gap G")
        value: Offending value, as supplied or derived
        bound: Human readable description of the violated bound
    """

    def __init__(self, quantity: str, value: Any, bound: str, detail: Optional[str] = None):
        self.quantity = quantity
        self.value = value
        self.bound = bound
        message = f"{quantity} must be {bound}: got {value}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class InvariantViolation(ArcFlashError, RuntimeError):
    """An internally unreachable state was reached.

    Indicates a defect in the calling code, e.g. mixing a high-voltage
    arcing current result with a low-voltage cubicle. Not meant to be
    handled at runtime.
    """

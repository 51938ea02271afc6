"""Utility functions for the negative test calculator."""

from __future__ import annotations

import logging
import math
from numbers import Real

from .const import DISPLAY_PRECISION, SUMMARY_PREFIX
from .exceptions import InvalidInputError

_LOGGER = logging.getLogger(__name__)


def ensure_in_range(name: str, value: float, min_val: float, max_val: float) -> float:
    """Validate a numeric input and return it as a float.

    Args:
        name: Input name used in the error message
        value: Value to validate
        min_val: Inclusive lower bound
        max_val: Inclusive upper bound

    Returns:
        The value converted to float

    Raises:
        InvalidInputError: If the value is not a real number, is not finite or
            lies outside [min_val, max_val]

    """
    if isinstance(value, bool) or not isinstance(value, Real):
        _LOGGER.warning("Rejected %s: %r is not a number", name, value)
        raise InvalidInputError(f"{name} must be a number, got {value!r}")

    value = float(value)
    if not math.isfinite(value):
        _LOGGER.warning("Rejected %s: %r is not finite", name, value)
        raise InvalidInputError(f"{name} must be finite, got {value!r}")

    if not min_val <= value <= max_val:
        _LOGGER.warning(
            "Rejected %s: %s outside [%s, %s]", name, value, min_val, max_val
        )
        raise InvalidInputError(
            f"{name} must be between {min_val:g} and {max_val:g}, got {value:g}"
        )

    return value


def format_posterior(value: float) -> float:
    """Round a posterior for display."""
    return round(float(value), DISPLAY_PRECISION)


def format_summary(posterior: float) -> str:
    """Return the text line shown next to the sliders."""
    return f"{SUMMARY_PREFIX} {format_posterior(posterior)}"

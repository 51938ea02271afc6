"""Input validation schema for the negative test calculator."""

from __future__ import annotations

import logging
import math
from typing import Any

import voluptuous as vol

from .const import (
    ATTR_FALSE_NEGATIVE_RATE,
    ATTR_FALSE_POSITIVE_RATE,
    ATTR_PRIOR,
    DEFAULT_FALSE_NEGATIVE_RATE,
    DEFAULT_FALSE_POSITIVE_RATE,
    DEFAULT_PRIOR,
    MAX_PRIOR,
    MAX_RATE,
    MIN_PRIOR,
    MIN_RATE,
)
from .exceptions import InvalidInputError
from .types import CalculatorInputs

_LOGGER = logging.getLogger(__name__)


def finite_float(value: Any) -> float:
    """Coerce a value to a finite float, rejecting booleans."""
    if isinstance(value, bool):
        raise vol.Invalid("expected a number, got a boolean")
    try:
        value = float(value)
    except (TypeError, ValueError) as err:
        raise vol.Invalid("expected float") from err
    if not math.isfinite(value):
        raise vol.Invalid("value must be finite")
    return value


PRIOR_VALIDATOR = vol.All(finite_float, vol.Range(min=MIN_PRIOR, max=MAX_PRIOR))
RATE_VALIDATOR = vol.All(finite_float, vol.Range(min=MIN_RATE, max=MAX_RATE))

INPUT_SCHEMA = vol.Schema(
    {
        vol.Optional(ATTR_PRIOR, default=DEFAULT_PRIOR): PRIOR_VALIDATOR,
        vol.Optional(
            ATTR_FALSE_NEGATIVE_RATE, default=DEFAULT_FALSE_NEGATIVE_RATE
        ): RATE_VALIDATOR,
        vol.Optional(
            ATTR_FALSE_POSITIVE_RATE, default=DEFAULT_FALSE_POSITIVE_RATE
        ): RATE_VALIDATOR,
    },
    extra=vol.REMOVE_EXTRA,
)


def parse_inputs(payload: dict[str, Any] | None) -> CalculatorInputs:
    """Validate a raw payload (JSON body or query string) into inputs.

    Missing keys fall back to the slider defaults; unknown keys are dropped.

    Raises:
        InvalidInputError: If the payload is not a mapping or a value cannot be
            coerced to a finite float within its range

    """
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise InvalidInputError("Input payload must be an object")

    try:
        data = INPUT_SCHEMA(payload)
    except vol.MultipleInvalid as exc:
        errors = "; ".join(
            f"{'.'.join(str(p) for p in err.path) or 'payload'}: {err.msg}"
            for err in exc.errors
        )
        _LOGGER.warning("Invalid calculator input: %s", errors)
        raise InvalidInputError(errors) from exc

    return CalculatorInputs(
        prior=data[ATTR_PRIOR],
        false_negative_rate=data[ATTR_FALSE_NEGATIVE_RATE],
        false_positive_rate=data[ATTR_FALSE_POSITIVE_RATE],
    )

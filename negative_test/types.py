"""Type definitions for the negative test calculator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .const import (
    ATTR_FALSE_NEGATIVE_RATE,
    ATTR_FALSE_POSITIVE_RATE,
    ATTR_PRIOR,
    DEFAULT_FALSE_NEGATIVE_RATE,
    DEFAULT_FALSE_POSITIVE_RATE,
    DEFAULT_PRIOR,
)


@dataclass(frozen=True)
class CalculatorInputs:
    """Full input tuple of the calculator.

    Attributes:
        prior: Belief about infection incidence, in percent (0-100)
        false_negative_rate: P(negative test | infected)
        false_positive_rate: P(positive test | not infected)
    """

    prior: float = DEFAULT_PRIOR
    false_negative_rate: float = DEFAULT_FALSE_NEGATIVE_RATE
    false_positive_rate: float = DEFAULT_FALSE_POSITIVE_RATE

    def as_dict(self) -> dict[str, float]:
        """Return the inputs keyed by their payload names."""
        return {
            ATTR_PRIOR: self.prior,
            ATTR_FALSE_NEGATIVE_RATE: self.false_negative_rate,
            ATTR_FALSE_POSITIVE_RATE: self.false_positive_rate,
        }


@dataclass(frozen=True)
class GroupRisk:
    """One row of the group risk table."""

    group_size: int
    prob_at_least_one: float  # percent


@dataclass(frozen=True)
class CalculationResult:
    """Derived outputs for one set of inputs.

    When ``error`` is set the posterior is undefined, ``posterior`` is None and
    ``group_risk`` is empty; ``error`` is meant to be shown to the user.
    """

    inputs: CalculatorInputs
    posterior: float | None
    group_risk: tuple[GroupRisk, ...] = field(default_factory=tuple)
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Return True if both outputs are available."""
        return self.error is None

    def as_dict(self) -> dict[str, Any]:
        """Serialize the result for JSON responses."""
        return {
            "inputs": self.inputs.as_dict(),
            "posterior": self.posterior,
            "group_risk": [
                {
                    "group_size": row.group_size,
                    "prob_at_least_one": row.prob_at_least_one,
                }
                for row in self.group_risk
            ],
            "error": self.error,
        }

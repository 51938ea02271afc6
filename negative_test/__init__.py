"""Probability of no infection given a negative test result."""

from __future__ import annotations

from .coordinator import CalculatorCoordinator, calculate
from .exceptions import DomainError, InvalidInputError, NegativeTestError
from .probability import compute_group_risk_table, compute_posterior
from .types import CalculationResult, CalculatorInputs, GroupRisk

__all__ = [
    "CalculationResult",
    "CalculatorCoordinator",
    "CalculatorInputs",
    "DomainError",
    "GroupRisk",
    "InvalidInputError",
    "NegativeTestError",
    "calculate",
    "compute_group_risk_table",
    "compute_posterior",
]

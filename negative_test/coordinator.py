"""Recalculation coordinator for the negative test calculator.

Every change of an input is an event carrying the full input tuple. The
coordinator computes the posterior and the group risk table for it, keeps the
latest result and hands it to each registered render callback.
"""

from __future__ import annotations

from collections.abc import Callable
import dataclasses
import logging

from .const import DOMAIN_ERROR_MESSAGE, INPUT_KEYS
from .exceptions import DomainError
from .probability import compute_group_risk_table, compute_posterior
from .types import CalculationResult, CalculatorInputs

_LOGGER = logging.getLogger(__name__)

ResultListener = Callable[[CalculationResult], None]


def calculate(inputs: CalculatorInputs) -> CalculationResult:
    """Compute both derived outputs for a set of inputs.

    An undefined posterior (0/0) is returned as a result carrying a
    user-visible error message instead of a chart. Invalid inputs raise
    InvalidInputError.
    """
    _LOGGER.debug("=== RECALCULATION START: %s ===", inputs)

    try:
        posterior = compute_posterior(
            inputs.prior,
            inputs.false_negative_rate,
            inputs.false_positive_rate,
        )
    except DomainError as exc:
        _LOGGER.info("No posterior for %s: %s", inputs, exc)
        return CalculationResult(
            inputs=inputs, posterior=None, error=DOMAIN_ERROR_MESSAGE
        )

    _LOGGER.debug("posterior = %.5f", posterior)

    return CalculationResult(
        inputs=inputs,
        posterior=posterior,
        group_risk=compute_group_risk_table(posterior),
    )


class CalculatorCoordinator:
    """Hold the inputs of one session and notify listeners on every change."""

    def __init__(self, inputs: CalculatorInputs | None = None) -> None:
        """Initialize the coordinator.

        Args:
            inputs: Initial inputs. Defaults to the slider defaults.
        """
        self.inputs = inputs if inputs is not None else CalculatorInputs()
        self.data: CalculationResult | None = None
        self._listeners: dict[int, ResultListener] = {}
        self._next_listener_id = 0

    def add_listener(self, update_callback: ResultListener) -> Callable[[], None]:
        """Register a render callback and return a function that removes it."""
        listener_id = self._next_listener_id
        self._next_listener_id += 1
        self._listeners[listener_id] = update_callback

        def remove_listener() -> None:
            self._listeners.pop(listener_id, None)

        return remove_listener

    def refresh(self) -> CalculationResult:
        """Recalculate the current inputs and notify listeners."""
        return self.handle_input_change(self.inputs)

    def handle_input_change(self, inputs: CalculatorInputs) -> CalculationResult:
        """Handle an input-change event carrying the full input tuple.

        The new result replaces the previous one; there is nothing to cancel.
        """
        result = calculate(inputs)
        self.inputs = inputs
        self.data = result
        self._notify_listeners(result)
        return result

    def update_input(self, name: str, value: float) -> CalculationResult:
        """Change a single input, keeping the other two."""
        if name not in INPUT_KEYS:
            raise KeyError(f"Unknown input: {name}")
        return self.handle_input_change(
            dataclasses.replace(self.inputs, **{name: value})
        )

    def _notify_listeners(self, result: CalculationResult) -> None:
        for update_callback in list(self._listeners.values()):
            try:
                update_callback(result)
            except Exception:
                _LOGGER.exception("Error in render callback %s", update_callback)

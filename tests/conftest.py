"""Pytest configuration and fixtures for the Negative Test Calculator tests."""

from __future__ import annotations

from collections.abc import Generator
from unittest.mock import Mock

import pytest

from calculator.app import app as flask_app
from negative_test.coordinator import CalculatorCoordinator
from negative_test.types import CalculatorInputs


@pytest.fixture
def default_inputs() -> CalculatorInputs:
    """Slider defaults: prior 0.1%, fnr 0.28, fpr 0.01."""
    return CalculatorInputs()


@pytest.fixture
def reference_inputs() -> CalculatorInputs:
    """Worked example: prior 1%, fnr 0.28, fpr 0.01."""
    return CalculatorInputs(
        prior=1.0, false_negative_rate=0.28, false_positive_rate=0.01
    )


@pytest.fixture
def undefined_inputs() -> CalculatorInputs:
    """Inputs for which a negative test cannot occur (0/0)."""
    return CalculatorInputs(
        prior=100.0, false_negative_rate=0.0, false_positive_rate=0.01
    )


@pytest.fixture
def coordinator() -> CalculatorCoordinator:
    """Coordinator starting from the slider defaults."""
    return CalculatorCoordinator()


@pytest.fixture
def listener() -> Mock:
    """Render callback recording the results it receives."""
    return Mock()


@pytest.fixture
def client() -> Generator:
    """Flask test client."""
    flask_app.config.update(TESTING=True)
    with flask_app.test_client() as test_client:
        yield test_client

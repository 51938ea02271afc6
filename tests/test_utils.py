"""Tests for utils module."""

import math

import pytest

from negative_test.const import SUMMARY_PREFIX
from negative_test.exceptions import InvalidInputError
from negative_test.utils import (
    ensure_in_range,
    format_posterior,
    format_summary,
)


class TestUtils:
    """Test utility functions."""

    def test_format_posterior(self) -> None:
        """Posterior is rounded to 5 decimal digits."""
        assert format_posterior(0.9971512869) == 0.99715
        assert format_posterior(0.999716969) == 0.99972
        assert format_posterior(1.0) == 1.0
        assert format_posterior(0.0) == 0.0
        assert format_posterior(0.123456789) == 0.12346

    def test_format_summary(self) -> None:
        """The text line ends with the rounded posterior."""
        assert format_summary(0.9971512869) == f"{SUMMARY_PREFIX} 0.99715"


class TestEnsureInRange:
    """Test ensure_in_range."""

    @pytest.mark.parametrize("value", [0, 0.0, 0.5, 1, 1.0])
    def test_valid(self, value) -> None:
        """Bounds are inclusive and ints become floats."""
        result = ensure_in_range("rate", value, 0.0, 1.0)
        assert result == value
        assert isinstance(result, float)

    @pytest.mark.parametrize(
        ("value", "match"),
        [
            (-0.001, "between"),
            (1.001, "between"),
            (float("nan"), "finite"),
            (float("inf"), "finite"),
            ("0.5", "number"),
            (None, "number"),
            (False, "number"),
        ],
    )
    def test_invalid(self, value, match: str) -> None:
        """Invalid values raise InvalidInputError naming the input."""
        with pytest.raises(InvalidInputError, match=match) as exc_info:
            ensure_in_range("rate", value, 0.0, 1.0)
        assert "rate" in str(exc_info.value)

    def test_nan_is_never_returned(self) -> None:
        """NaN never passes validation."""
        with pytest.raises(InvalidInputError):
            ensure_in_range("prior", math.nan, 0.0, 100.0)

"""
Tests for Numerical Safeguards — float validity and tolerant comparison

Checked:
1. NaN/Inf detection
2. Finite-value validation with named error messages
3. Relative/absolute tolerance comparisons, scalar and pairwise
"""

import pytest

from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
    is_close_pair,
    is_valid_float,
    validate_finite,
)


class TestEpsilonConstants:
    """Epsilon parameters."""

    def test_values(self) -> None:
        assert EPS_FLOAT_COMPARE_REL == 1e-9
        assert EPS_FLOAT_COMPARE_ABS == 1e-12


class TestIsValidFloat:
    """is_valid_float: finite check."""

    def test_finite_values(self) -> None:
        assert is_valid_float(0.0) is True
        assert is_valid_float(-1.5) is True
        assert is_valid_float(1e308) is True

    def test_non_finite_values(self) -> None:
        assert is_valid_float(float("nan")) is False
        assert is_valid_float(float("inf")) is False
        assert is_valid_float(float("-inf")) is False


class TestValidateFinite:
    """validate_finite: raises on NaN/Inf."""

    def test_returns_value(self) -> None:
        assert validate_finite(2.5, "x") == 2.5

    def test_nan_rejected(self) -> None:
        with pytest.raises(ValueError, match="position must be a finite float"):
            validate_finite(float("nan"), "position")

    def test_inf_rejected(self) -> None:
        with pytest.raises(ValueError, match="NaN/Inf"):
            validate_finite(float("-inf"), "time")


class TestIsClose:
    """is_close: tolerant comparison."""

    def test_equal_values(self) -> None:
        assert is_close(1.0, 1.0) is True

    def test_within_relative_tolerance(self) -> None:
        assert is_close(1.0, 1.0 + 1e-10) is True
        assert is_close(1e10, 1e10 + 1.0) is True

    def test_within_absolute_tolerance(self) -> None:
        assert is_close(0.0, 1e-13) is True

    def test_outside_tolerance(self) -> None:
        assert is_close(1.0, 1.1) is False
        assert is_close(0.0, 1e-6) is False

    def test_custom_tolerance(self) -> None:
        assert is_close(1.0, 1.05, rel_tol=0.1) is True


class TestIsClosePair:
    """is_close_pair: componentwise comparison of (x, t)."""

    def test_close_pairs(self) -> None:
        assert is_close_pair((1.0, 2.0), (1.0 + 1e-12, 2.0 - 1e-12)) is True

    def test_one_component_differs(self) -> None:
        assert is_close_pair((1.0, 2.0), (1.0, 2.1)) is False
        assert is_close_pair((1.0, 2.0), (1.1, 2.0)) is False

    def test_custom_abs_tolerance(self) -> None:
        assert is_close_pair((0.0, 0.0), (1e-6, -1e-6), abs_tol=1e-5) is True

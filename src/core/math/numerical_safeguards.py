"""
Numerical Safeguards — float validity and tolerant comparison

Primitives shared by the Lorentz transform and its verification helpers:
- Finite-value checks (NaN/Inf detection)
- Tolerant float comparison with relative and absolute epsilon

INVARIANTS:
1. Nothing here mutates or rounds its inputs
2. Comparisons always take machine precision into account
"""

import math
from typing import Final

# =============================================================================
# EPSILON PARAMETERS
# =============================================================================

# Relative tolerance for float comparison (round trip, interval preservation)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Absolute tolerance for float comparison near zero
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf CHECKS
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Check that a float is finite (neither NaN nor Inf).

    Args:
        value: Value to check

    Returns:
        True if the value is finite
    """
    return math.isfinite(value)


def validate_finite(value: float, name: str) -> float:
    """
    Validate that a value is a finite float.

    Args:
        value: Value to check
        name: Parameter name (used in the error message)

    Returns:
        The value unchanged

    Raises:
        ValueError: If value is NaN or Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a finite float (not NaN/Inf), got {value}")
    return value


# =============================================================================
# EPSILON COMPARISONS
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Compare two floats within machine-precision tolerance.

    Algorithm:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: First value
        b: Second value
        rel_tol: Relative tolerance (default: 1e-9)
        abs_tol: Absolute tolerance (default: 1e-12)

    Returns:
        True if the values agree within tolerance

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 1e-13)
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_close_pair(
    a: tuple[float, float],
    b: tuple[float, float],
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """Componentwise is_close for (position, time) pairs."""
    return is_close(a[0], b[0], rel_tol, abs_tol) and is_close(a[1], b[1], rel_tol, abs_tol)

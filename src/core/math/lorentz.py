"""
Lorentz — 1+1D special-relativistic coordinate transforms

Natural units: the speed of light c = 1.

The module provides:
- Forward boost of an event (x, t) into a frame moving with velocity β
- Inverse boost (forward boost with -β)
- The frame-independent spacetime interval √|(ct)² - x²|
- Timelike/spacelike classification relative to the origin

CRITICAL INVARIANTS:
1. |β| < 1 strictly, otherwise InvalidParameter (never clamped, never NaN)
2. inverse_transform(*transform(x, t, β), β) ≈ (x, t)
3. invariant(x, t) ≈ invariant(*transform(x, t, β))
4. Light-cone events (x² == t²), including the origin, are NOT timelike
5. No internal rounding; rounding for display is a caller concern

FORMULAS:
    γ = 1 / √(1 - β²)
    α = √(1 - β²) = 1 / γ
    x' = γ (x - β c t)
    t' = γ (t - (β / c) x)
    s  = √|(c t)² - x²|
"""

import logging
import math
from enum import Enum
from typing import Final

from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close_pair,
)

logger = logging.getLogger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================

# Speed of light in natural units
SPEED_OF_LIGHT: Final[float] = 1.0

# Exclusive bound on |β|
BETA_LIMIT: Final[float] = 1.0


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidParameter(ValueError):
    """
    Velocity parameter outside the subluminal domain: |β| >= 1.

    Raised before any computation takes place. Subclasses ValueError so that
    generic argument validation handlers catch it as well.
    """

    def __init__(self, beta: float):
        self.beta = beta
        super().__init__(f"Absolute beta must be less than {BETA_LIMIT}, got beta={beta!r}")


# =============================================================================
# INTERVAL TYPE
# =============================================================================


class IntervalType(str, Enum):
    """Two-way classification of a spacetime interval from the origin."""

    TIMELIKE = "timelike"
    SPACELIKE = "spacelike"

    @property
    def quantity_name(self) -> str:
        """Name of the invariant this interval type measures."""
        if self is IntervalType.TIMELIKE:
            return "proper time"
        return "proper distance"


# =============================================================================
# VELOCITY PARAMETER
# =============================================================================


def check_beta(beta: float) -> float:
    """
    Validate the velocity parameter.

    Args:
        beta: Relative velocity as a fraction of c

    Returns:
        beta unchanged

    Raises:
        InvalidParameter: if |beta| >= 1 (or beta is NaN)
    """
    # Written as a positive test so that NaN fails it as well
    if not abs(beta) < BETA_LIMIT:
        raise InvalidParameter(beta)
    return beta


def contraction_factor(beta: float) -> float:
    """
    Contraction factor α = √(1 - β²) = 1/γ.

    Examples:
        >>> abs(contraction_factor(0.6) - 0.8) < 1e-12
        True
        >>> contraction_factor(0.0)
        1.0
    """
    check_beta(beta)
    return math.sqrt(1.0 - beta**2)


def lorentz_factor(beta: float) -> float:
    """
    Lorentz factor γ = 1 / √(1 - β²).

    Args:
        beta: Relative velocity, |beta| < 1

    Returns:
        γ >= 1

    Raises:
        InvalidParameter: if |beta| >= 1

    Examples:
        >>> abs(lorentz_factor(0.6) - 1.25) < 1e-12
        True
        >>> lorentz_factor(0.0)
        1.0
    """
    return 1.0 / contraction_factor(beta)


# =============================================================================
# TRANSFORM
# =============================================================================


def transform(x: float, t: float, beta: float) -> tuple[float, float]:
    """
    Boost the event (x, t) into the frame moving with velocity beta.

    Args:
        x: Position in the original frame
        t: Time in the original frame
        beta: Relative velocity of the new frame, |beta| < 1

    Returns:
        (x_prime, t_prime): event coordinates in the new frame

    Raises:
        InvalidParameter: if |beta| >= 1

    Examples:
        >>> x_prime, t_prime = transform(0.0, 1.0, 0.6)
        >>> abs(x_prime + 0.75) < 1e-12 and abs(t_prime - 1.25) < 1e-12
        True
        >>> transform(2.0, 3.0, 0.0)
        (2.0, 3.0)
    """
    gamma = lorentz_factor(beta)

    x_prime = gamma * (x - beta * SPEED_OF_LIGHT * t)
    t_prime = gamma * (t - (beta / SPEED_OF_LIGHT) * x)

    return (x_prime, t_prime)


def inverse_transform(x_prime: float, t_prime: float, beta: float) -> tuple[float, float]:
    """
    Recover the original event from boosted coordinates.

    Equivalent to transform(x_prime, t_prime, -beta). beta is validated
    before negation.

    Raises:
        InvalidParameter: if |beta| >= 1
    """
    check_beta(beta)
    return transform(x_prime, t_prime, -beta)


def round_trip(x: float, t: float, beta: float) -> tuple[float, float]:
    """
    Boost (x, t) with beta and boost it back.

    Returns:
        (x_back, t_back), equal to (x, t) up to floating-point rounding
    """
    x_prime, t_prime = transform(x, t, beta)
    x_back, t_back = inverse_transform(x_prime, t_prime, beta)
    logger.debug(
        "round trip beta=%r: (%r, %r) -> (%r, %r) -> (%r, %r)",
        beta, x, t, x_prime, t_prime, x_back, t_back,
    )
    return (x_back, t_back)


# =============================================================================
# INVARIANT & CLASSIFIER
# =============================================================================


def squared_interval(x: float, t: float) -> float:
    """
    Signed interval (ct)² - x²: positive timelike, negative spacelike.

    Evaluated as (ct - x)(ct + x). Float multiplication saturates to ±inf
    for very large coordinates instead of raising OverflowError like `**`.
    """
    ct = SPEED_OF_LIGHT * t
    return (ct - x) * (ct + x)


def invariant(x: float, t: float) -> float:
    """
    Spacetime interval magnitude √|(ct)² - x²|.

    Proper time for timelike events, proper distance for spacelike ones.
    Always >= 0, and finite for every finite (x, t).

    Examples:
        >>> invariant(3.0, 5.0)
        4.0
        >>> invariant(5.0, 3.0)
        4.0
        >>> abs(invariant(1e200, 0.0) / 1e200 - 1.0) < 1e-12
        True
    """
    interval = squared_interval(x, t)
    if math.isfinite(interval):
        return math.sqrt(abs(interval))

    # (ct)² - x² overflowed (or ct - x did, giving inf * 0 = nan): root each
    # factor separately, on halved coordinates so ct ± x cannot overflow
    half_ct = 0.5 * SPEED_OF_LIGHT * t
    half_x = 0.5 * x
    return 2.0 * math.sqrt(abs(half_ct - half_x)) * math.sqrt(abs(half_ct + half_x))


def is_timelike(x: float, t: float) -> bool:
    """
    True iff x² < (ct)², evaluated as |x| < |ct|.

    The inequality is strict: events on the light cone, including the
    origin, are not timelike.

    Examples:
        >>> is_timelike(0.0, 5.0)
        True
        >>> is_timelike(3.0, 3.0)
        False
    """
    return abs(x) < abs(SPEED_OF_LIGHT * t)


def classify_interval(x: float, t: float) -> IntervalType:
    """Label the interval of (x, t); light-cone events fall under SPACELIKE."""
    return IntervalType.TIMELIKE if is_timelike(x, t) else IntervalType.SPACELIKE


def invariant_quantity_name(x: float, t: float) -> str:
    """'proper time' for timelike events, 'proper distance' otherwise."""
    return classify_interval(x, t).quantity_name


# =============================================================================
# VERIFICATION
# =============================================================================


def round_trip_matches(
    x: float,
    t: float,
    beta: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Check that a boost followed by its inverse returns (x, t).

    Rounding error of either coordinate scales with the larger of |x|, |t|,
    so the absolute tolerance is widened to rel_tol * max(|x|, |t|).
    """
    scale = max(abs(x), abs(t))
    return is_close_pair(
        round_trip(x, t, beta),
        (x, t),
        rel_tol=rel_tol,
        abs_tol=max(abs_tol, rel_tol * scale),
    )


def interval_preserved(
    x: float,
    t: float,
    x_prime: float,
    t_prime: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Check that two events share the same spacetime interval.

    Compares the signed squared intervals rather than their roots, which
    stays well conditioned near the light cone. All four coordinates are
    divided by the largest magnitude first, so the squares cannot overflow:

        diff = |s²(x, t) - s²(x', t')| / m²,   m = max(|x|, |t|, |x'|, |t'|)
        preserved  <=>  diff <= rel_tol  or  diff · m² <= abs_tol
    """
    scale = max(abs(x), abs(t), abs(x_prime), abs(t_prime))
    if scale == 0.0:
        return True

    diff = abs(
        squared_interval(x / scale, t / scale)
        - squared_interval(x_prime / scale, t_prime / scale)
    )
    return diff <= rel_tol or diff * scale * scale <= abs_tol

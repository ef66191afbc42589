"""
Core math modules

Lorentz transforms in 1+1D and the numerical primitives they rely on.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
    is_close_pair,
    is_valid_float,
    validate_finite,
)

# Lorentz transforms
from src.core.math.lorentz import (
    BETA_LIMIT,
    SPEED_OF_LIGHT,
    IntervalType,
    InvalidParameter,
    check_beta,
    classify_interval,
    contraction_factor,
    interval_preserved,
    invariant,
    invariant_quantity_name,
    inverse_transform,
    is_timelike,
    lorentz_factor,
    round_trip,
    round_trip_matches,
    squared_interval,
    transform,
)

__all__ = [
    # Numerical Safeguards
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "is_close",
    "is_close_pair",
    "is_valid_float",
    "validate_finite",
    # Lorentz
    "BETA_LIMIT",
    "SPEED_OF_LIGHT",
    "IntervalType",
    "InvalidParameter",
    "check_beta",
    "classify_interval",
    "contraction_factor",
    "interval_preserved",
    "invariant",
    "invariant_quantity_name",
    "inverse_transform",
    "is_timelike",
    "lorentz_factor",
    "round_trip",
    "round_trip_matches",
    "squared_interval",
    "transform",
]

"""
Core math modules

Численные примитивы, на которых построена векторная алгебра.
"""

from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # NaN/Inf detection
    is_numeric_scalar,
    is_real_number,
    is_valid_float,
    # IEEE-754 arithmetic
    ieee_divide,
    ieee_max,
    ieee_min,
    # Epsilon comparisons
    is_close,
    # Validation
    validate_non_negative,
)

__all__ = [
    # Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # NaN/Inf detection
    "is_numeric_scalar",
    "is_real_number",
    "is_valid_float",
    # IEEE-754 arithmetic
    "ieee_divide",
    "ieee_max",
    "ieee_min",
    # Epsilon comparisons
    "is_close",
    # Validation
    "validate_non_negative",
]

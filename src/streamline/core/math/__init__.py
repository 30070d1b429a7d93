"""
Core math modules для streamline

Численные примитивы и агрегаты с гарантией валидности входов.
"""

# Numerical Safeguards
from streamline.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_CALC,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Checks
    is_close,
    is_valid_float,
    is_zero,
    safe_divide,
    # Validation
    validate_finite,
    validate_in_range,
    validate_non_negative,
    validate_positive,
)

# Weighted Average
from streamline.core.math.weighted import (
    WeightedAverageUndefined,
    group_weighted_average,
    weighted_average,
    weighted_average_of,
)

__all__ = [
    # Numerical Safeguards - Epsilon constants
    "EPS_CALC",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards - Checks
    "is_close",
    "is_valid_float",
    "is_zero",
    "safe_divide",
    # Numerical Safeguards - Validation
    "validate_finite",
    "validate_in_range",
    "validate_non_negative",
    "validate_positive",
    # Weighted Average - Exceptions
    "WeightedAverageUndefined",
    # Weighted Average - Functions
    "group_weighted_average",
    "weighted_average",
    "weighted_average_of",
]

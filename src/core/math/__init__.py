"""
Core math modules

Float-примитивы для матричной модели.
"""

from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Config
    ToleranceConfig,
    # Checks & comparisons
    format_float,
    is_close,
    is_valid_float,
    validate_non_negative,
)

__all__ = [
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "ToleranceConfig",
    "format_float",
    "is_close",
    "is_valid_float",
    "validate_non_negative",
]

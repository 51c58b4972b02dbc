"""
Core math modules

Точные целочисленные примитивы для решения линейных диофантовых уравнений.
"""

# Integer Safeguards
from src.core.math.integer_safeguards import (
    # Bounds
    INT32_MAX,
    INT64_MAX,
    # Exceptions
    LatticeOverflowError,
    # Sign / division
    direction,
    floor_mod,
    sign,
    trunc_div,
    # Checked arithmetic
    check_magnitude,
    checked_add,
    checked_mul,
    checked_sub,
    # Validation
    is_strict_int,
    validate_bound,
    validate_int,
    validate_non_negative_int,
)

# Extended GCD
from src.core.math.extended_gcd import (
    BezoutResult,
    extended_gcd,
    gcd,
)

__all__ = [
    # Integer Safeguards — Bounds
    "INT32_MAX",
    "INT64_MAX",
    # Integer Safeguards — Exceptions
    "LatticeOverflowError",
    # Integer Safeguards — Sign / division
    "direction",
    "floor_mod",
    "sign",
    "trunc_div",
    # Integer Safeguards — Checked arithmetic
    "check_magnitude",
    "checked_add",
    "checked_mul",
    "checked_sub",
    # Integer Safeguards — Validation
    "is_strict_int",
    "validate_bound",
    "validate_int",
    "validate_non_negative_int",
    # Extended GCD
    "BezoutResult",
    "extended_gcd",
    "gcd",
]

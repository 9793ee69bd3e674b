"""
Core math modules для Fraction Calculator

Целочисленные примитивы для точной рациональной арифметики.
"""

from src.core.math.integer_arithmetic import (
    FLOAT_TO_RATIONAL_PRECISION,
    calc_gcd,
    is_valid_float,
    round_half_up,
    split_float,
)

__all__ = [
    # Constants
    "FLOAT_TO_RATIONAL_PRECISION",
    # Functions
    "calc_gcd",
    "is_valid_float",
    "round_half_up",
    "split_float",
]

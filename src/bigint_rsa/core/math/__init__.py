"""
Core math modules для bigint_rsa

Беззнаковая арифметика над последовательностями десятичных цифр:
сложение/вычитание/сравнение, умножение Карацубы, doubling division.
"""

# Magnitude Arithmetic
from bigint_rsa.core.math.magnitude import (
    ONE_DIGITS,
    RADIX,
    ZERO_DIGITS,
    Digits,
    add_magnitudes,
    compare_magnitudes,
    double_magnitude,
    halve_magnitude,
    is_zero_magnitude,
    pad_left,
    shift_left,
    split_trailing_zeros,
    strip_leading_zeros,
    subtract_magnitudes,
)

# Karatsuba Multiplier
from bigint_rsa.core.math.karatsuba import (
    DEFAULT_ARITHMETIC_CONFIG,
    KARATSUBA_THRESHOLD,
    ArithmeticConfig,
    karatsuba_multiply,
    schoolbook_multiply,
)

# Divider
from bigint_rsa.core.math.division import (
    MagnitudeDivision,
    divide_by_repeated_subtraction,
    divide_magnitudes,
)

__all__ = [
    # Magnitude — Types & constants
    "Digits",
    "ONE_DIGITS",
    "RADIX",
    "ZERO_DIGITS",
    # Magnitude — Functions
    "add_magnitudes",
    "compare_magnitudes",
    "double_magnitude",
    "halve_magnitude",
    "is_zero_magnitude",
    "pad_left",
    "shift_left",
    "split_trailing_zeros",
    "strip_leading_zeros",
    "subtract_magnitudes",
    # Karatsuba — Config
    "ArithmeticConfig",
    "DEFAULT_ARITHMETIC_CONFIG",
    "KARATSUBA_THRESHOLD",
    # Karatsuba — Functions
    "karatsuba_multiply",
    "schoolbook_multiply",
    # Divider
    "MagnitudeDivision",
    "divide_by_repeated_subtraction",
    "divide_magnitudes",
]

"""
Divider — деление модулей с остатком

Модуль реализует деление неотрицательных модулей:
- divide_magnitudes: doubling division, рабочий путь
- divide_by_repeated_subtraction: O(quotient), только эталон для тестов
  на малых числах

DOUBLING DIVISION:
    divide(a, b):
        если a < b -> (0, a)
        (q, r) = divide(a, 2b)
        q = 2q
        если r < b -> (q, r), иначе -> (q + 1, r - b)

Глубина рекурсии равна O(log2(quotient)): для модулей RSA размера это
тысячи уровней, поэтому рекурсия развёрнута в явный стек удвоенных
делителей b, 2b, 4b, ... и проход по нему в обратном порядке.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. a = quotient * b + remainder
2. 0 <= remainder < b
3. b == 0 -> DivisionByZero
"""

from typing import NamedTuple, Sequence

from bigint_rsa.core.errors import DivisionByZero
from bigint_rsa.core.math.magnitude import (
    ONE_DIGITS,
    ZERO_DIGITS,
    Digits,
    add_magnitudes,
    compare_magnitudes,
    double_magnitude,
    is_zero_magnitude,
    strip_leading_zeros,
    subtract_magnitudes,
)


class MagnitudeDivision(NamedTuple):
    """Результат деления модулей."""

    quotient: Digits
    remainder: Digits


def divide_magnitudes(a: Sequence[int], b: Sequence[int]) -> MagnitudeDivision:
    """
    Деление модулей doubling-алгоритмом.

    Args:
        a: Делимое (неотрицательный модуль)
        b: Делитель (неотрицательный модуль)

    Returns:
        MagnitudeDivision(quotient, remainder), оба нормализованы

    Raises:
        DivisionByZero: Если b == 0

    Examples:
        >>> divide_magnitudes((1, 0, 0), (3,))
        MagnitudeDivision(quotient=(3, 3), remainder=(1,))
    """
    if is_zero_magnitude(b):
        raise DivisionByZero("Division by zero magnitude")

    dividend = strip_leading_zeros(a)
    divisor = strip_leading_zeros(b)

    # Спуск рекурсии: b, 2b, 4b, ... пока делитель не превысит делимое
    divisors = []
    current = divisor
    while compare_magnitudes(dividend, current) >= 0:
        divisors.append(current)
        current = double_magnitude(current)

    # Базовый случай a < (2^k)b -> (0, a), затем подъём
    quotient = ZERO_DIGITS
    remainder = dividend
    for level_divisor in reversed(divisors):
        quotient = double_magnitude(quotient)
        if compare_magnitudes(remainder, level_divisor) >= 0:
            quotient = add_magnitudes(quotient, ONE_DIGITS)
            remainder = subtract_magnitudes(remainder, level_divisor)

    return MagnitudeDivision(quotient, remainder)


def divide_by_repeated_subtraction(
    a: Sequence[int], b: Sequence[int]
) -> MagnitudeDivision:
    """
    Деление повторным вычитанием.

    ВНИМАНИЕ: O(quotient) итераций. Непригодно для операндов
    криптографического размера; используется только как независимый
    эталон при проверке divide_magnitudes на малых числах.

    Raises:
        DivisionByZero: Если b == 0
    """
    if is_zero_magnitude(b):
        raise DivisionByZero("Division by zero magnitude")

    quotient = ZERO_DIGITS
    remainder = strip_leading_zeros(a)
    while compare_magnitudes(remainder, b) >= 0:
        remainder = subtract_magnitudes(remainder, b)
        quotient = add_magnitudes(quotient, ONE_DIGITS)

    return MagnitudeDivision(quotient, remainder)

"""
Karatsuba Multiplier — умножение модулей divide-and-conquer

Модуль реализует умножение неотрицательных модулей:
- schoolbook_multiply: прямая свёртка O(n·m) с переносом
- karatsuba_multiply: рекурсивное умножение O(n^1.585), три рекурсивных
  умножения на уровень вместо четырёх

АЛГОРИТМ (n = max(len(a), len(b)), m = n // 2):
    a = a_high * 10^m + a_low
    b = b_high * 10^m + b_low

    z0 = a_low * b_low
    z2 = a_high * b_high
    z1 = (a_low + a_high) * (b_low + b_high) - z2 - z0

    a * b = z2 * 10^(2m) + z1 * 10^m + z0

БАЗОВЫЕ СЛУЧАИ:
1. Ноль в любом операнде -> (0,)
2. Оба операнда из одной цифры -> прямое произведение (1-2 цифры)
3. Оба операнда не длиннее threshold -> schoolbook

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. karatsuba_multiply(a, b) == schoolbook_multiply(a, b) цифра-в-цифру
2. Входные последовательности не изменяются, ветви рекурсии
   не разделяют изменяемых буферов
3. Результат нормализован
"""

from dataclasses import dataclass
from typing import Final, Sequence

from bigint_rsa.core.math.magnitude import (
    RADIX,
    ZERO_DIGITS,
    Digits,
    add_magnitudes,
    shift_left,
    split_trailing_zeros,
    strip_leading_zeros,
    subtract_magnitudes,
)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Порог перехода на schoolbook: при длине обоих операндов <= порога
# накладные расходы рекурсии превышают выигрыш
KARATSUBA_THRESHOLD: Final[int] = 32


@dataclass(frozen=True)
class ArithmeticConfig:
    """Конфигурация арифметики BigInteger.

    - karatsuba_threshold: порог перехода на schoolbook (>= 1)
    """
    karatsuba_threshold: int = KARATSUBA_THRESHOLD

    def __post_init__(self) -> None:
        if self.karatsuba_threshold < 1:
            raise ValueError(
                f"karatsuba_threshold must be >= 1, got {self.karatsuba_threshold}"
            )


DEFAULT_ARITHMETIC_CONFIG: Final[ArithmeticConfig] = ArithmeticConfig()


# =============================================================================
# SCHOOLBOOK
# =============================================================================


def schoolbook_multiply(a: Sequence[int], b: Sequence[int]) -> Digits:
    """
    Умножение "столбиком": multiply-accumulate по всем парам цифр.

    Args:
        a: Первый модуль (старший разряд первым)
        b: Второй модуль

    Returns:
        Нормализованное произведение

    Examples:
        >>> schoolbook_multiply((1, 2), (3, 4))
        (4, 0, 8)
    """
    a_norm = strip_leading_zeros(a)
    b_norm = strip_leading_zeros(b)
    if a_norm == ZERO_DIGITS or b_norm == ZERO_DIGITS:
        return ZERO_DIGITS

    # Аккумулятор в порядке от младшего разряда
    a_low_first = a_norm[::-1]
    b_low_first = b_norm[::-1]
    acc = [0] * (len(a_norm) + len(b_norm))

    for i, a_digit in enumerate(a_low_first):
        if a_digit == 0:
            continue
        carry = 0
        for j, b_digit in enumerate(b_low_first):
            total = acc[i + j] + a_digit * b_digit + carry
            acc[i + j] = total % RADIX
            carry = total // RADIX
        k = i + len(b_low_first)
        while carry:
            total = acc[k] + carry
            acc[k] = total % RADIX
            carry = total // RADIX
            k += 1

    return strip_leading_zeros(acc[::-1])


# =============================================================================
# KARATSUBA
# =============================================================================


def _split_at(digits: Digits, m: int) -> tuple[Digits, Digits]:
    """Разбиение на (high, low), где low — младшие m цифр."""
    if len(digits) <= m:
        return ZERO_DIGITS, digits
    return strip_leading_zeros(digits[:-m]), strip_leading_zeros(digits[-m:])


def _single_digit_product(a: int, b: int) -> Digits:
    product = a * b
    if product >= RADIX:
        return (product // RADIX, product % RADIX)
    return (product,)


def _karatsuba(a: Digits, b: Digits, threshold: int) -> Digits:
    a = strip_leading_zeros(a)
    b = strip_leading_zeros(b)

    if a == ZERO_DIGITS or b == ZERO_DIGITS:
        return ZERO_DIGITS

    if len(a) == 1 and len(b) == 1:
        return _single_digit_product(a[0], b[0])

    if len(a) <= threshold and len(b) <= threshold:
        return schoolbook_multiply(a, b)

    n = max(len(a), len(b))
    m = n // 2

    a_high, a_low = _split_at(a, m)
    b_high, b_low = _split_at(b, m)

    z0 = _karatsuba(a_low, b_low, threshold)
    z2 = _karatsuba(a_high, b_high, threshold)
    z1 = _karatsuba(
        add_magnitudes(a_low, a_high),
        add_magnitudes(b_low, b_high),
        threshold,
    )
    z1 = subtract_magnitudes(subtract_magnitudes(z1, z2), z0)

    combined = add_magnitudes(
        add_magnitudes(shift_left(z2, 2 * m), shift_left(z1, m)),
        z0,
    )
    return strip_leading_zeros(combined)


def karatsuba_multiply(
    a: Sequence[int],
    b: Sequence[int],
    threshold: int = KARATSUBA_THRESHOLD,
) -> Digits:
    """
    Умножение модулей алгоритмом Карацубы.

    Перед рекурсией удаляются структурные нули: ведущие (нормализация)
    и младшие (выносятся как сдвиг 10^k и возвращаются в конце).

    Args:
        a: Первый модуль
        b: Второй модуль
        threshold: Порог перехода на schoolbook (>= 1)

    Returns:
        Нормализованное произведение

    Raises:
        ValueError: Если threshold < 1

    Examples:
        >>> karatsuba_multiply((9, 9), (9, 9))
        (9, 8, 0, 1)
    """
    if threshold < 1:
        raise ValueError(f"Karatsuba threshold must be >= 1, got {threshold}")

    a_core, a_shift = split_trailing_zeros(a)
    b_core, b_shift = split_trailing_zeros(b)
    if a_core == ZERO_DIGITS or b_core == ZERO_DIGITS:
        return ZERO_DIGITS

    product = _karatsuba(a_core, b_core, threshold)
    return shift_left(product, a_shift + b_shift)

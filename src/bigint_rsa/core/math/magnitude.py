"""
Magnitude Arithmetic — беззнаковые операции над последовательностями цифр

Модуль реализует базовые операции над модулями (magnitudes) чисел:
- Нормализация (удаление ведущих нулей)
- Сравнение модулей
- Сложение с переносом (carry)
- Вычитание с заёмом (borrow)
- Сдвиг на k десятичных разрядов

ПРЕДСТАВЛЕНИЕ:
    Magnitude — tuple десятичных цифр 0..9, старший разряд первым
    (most-significant-first). Например 1234 -> (1, 2, 3, 4).
    Ноль -> (0,).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Функции никогда не изменяют входные последовательности
   (все выравнивания выполняются над приватными копиями)
2. Результат всегда нормализован: нет ведущих нулей, минимум одна цифра
3. Вычитание требует minuend >= subtrahend (проверяется, иначе ValueError)
"""

from typing import Final, Sequence, Tuple

# =============================================================================
# ТИПЫ И КОНСТАНТЫ
# =============================================================================

Digits = Tuple[int, ...]

# Каноническое представление нуля
ZERO_DIGITS: Final[Digits] = (0,)

# Каноническое представление единицы
ONE_DIGITS: Final[Digits] = (1,)

# Основание системы счисления
RADIX: Final[int] = 10


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def strip_leading_zeros(digits: Sequence[int]) -> Digits:
    """
    Удаление ведущих (старших) нулей.

    Args:
        digits: Последовательность цифр (старший разряд первым), может быть пустой

    Returns:
        Нормализованный tuple; пустой вход и "все нули" -> (0,)

    Examples:
        >>> strip_leading_zeros((0, 0, 1, 2))
        (1, 2)
        >>> strip_leading_zeros(())
        (0,)
    """
    start = 0
    length = len(digits)
    while start < length and digits[start] == 0:
        start += 1

    if start == length:
        return ZERO_DIGITS

    return tuple(digits[start:])


def is_zero_magnitude(digits: Sequence[int]) -> bool:
    """True если все цифры нулевые (или последовательность пуста)."""
    return all(d == 0 for d in digits)


def pad_left(digits: Sequence[int], length: int) -> Digits:
    """
    Выравнивание ведущими нулями до длины length.

    Возвращает новый tuple; если digits уже не короче length,
    возвращается копия без изменений.
    """
    missing = length - len(digits)
    if missing <= 0:
        return tuple(digits)
    return (0,) * missing + tuple(digits)


def shift_left(digits: Sequence[int], positions: int) -> Digits:
    """
    Умножение на 10^positions: дописывание нулей в младшие разряды.

    Args:
        digits: Модуль числа
        positions: Количество разрядов (>= 0)

    Returns:
        Нормализованный сдвинутый модуль; сдвиг нуля даёт ноль

    Raises:
        ValueError: Если positions < 0
    """
    if positions < 0:
        raise ValueError(f"Shift must be non-negative, got {positions}")

    normalized = strip_leading_zeros(digits)
    if normalized == ZERO_DIGITS or positions == 0:
        return normalized

    return normalized + (0,) * positions


def split_trailing_zeros(digits: Sequence[int]) -> Tuple[Digits, int]:
    """
    Вынос младших нулей: digits = core * 10^count.

    Returns:
        (core, count); для нуля -> ((0,), 0)

    Examples:
        >>> split_trailing_zeros((1, 2, 0, 0))
        ((1, 2), 2)
    """
    normalized = strip_leading_zeros(digits)
    if normalized == ZERO_DIGITS:
        return ZERO_DIGITS, 0

    end = len(normalized)
    while normalized[end - 1] == 0:
        end -= 1

    return normalized[:end], len(normalized) - end


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_magnitudes(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Сравнение модулей двух чисел.

    Сначала по длине нормализованной последовательности (длиннее = больше,
    ведущих нулей нет), затем лексикографически от старшего разряда.

    Args:
        a: Первый модуль
        b: Второй модуль

    Returns:
        -1 если a < b, 0 если a == b, 1 если a > b

    Examples:
        >>> compare_magnitudes((1, 2, 3), (9, 9))
        1
        >>> compare_magnitudes((1, 2), (1, 3))
        -1
    """
    a_norm = strip_leading_zeros(a)
    b_norm = strip_leading_zeros(b)

    if len(a_norm) != len(b_norm):
        return 1 if len(a_norm) > len(b_norm) else -1

    for a_digit, b_digit in zip(a_norm, b_norm):
        if a_digit != b_digit:
            return 1 if a_digit > b_digit else -1

    return 0


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def add_magnitudes(a: Sequence[int], b: Sequence[int]) -> Digits:
    """
    Сложение двух неотрицательных модулей.

    Оба операнда выравниваются ведущими нулями до длины большего,
    перенос распространяется от младшего разряда к старшему;
    оставшийся перенос становится новым старшим разрядом.

    Args:
        a: Первый модуль
        b: Второй модуль

    Returns:
        Нормализованная сумма

    Examples:
        >>> add_magnitudes((1, 2, 3), (4, 5, 6))
        (5, 7, 9)
        >>> add_magnitudes((9, 9), (1,))
        (1, 0, 0)
    """
    length = max(len(a), len(b))
    a_padded = pad_left(a, length)
    b_padded = pad_left(b, length)

    result = [0] * length
    carry = 0
    for i in range(length - 1, -1, -1):
        total = a_padded[i] + b_padded[i] + carry
        result[i] = total % RADIX
        carry = total // RADIX

    if carry:
        result.insert(0, carry)

    return strip_leading_zeros(result)


def subtract_magnitudes(a: Sequence[int], b: Sequence[int]) -> Digits:
    """
    Вычитание модулей: a - b при условии |a| >= |b|.

    Заём распространяется от младшего разряда к старшему, ведущие нули
    результата удаляются (минимум одна цифра).

    Args:
        a: Уменьшаемое (minuend)
        b: Вычитаемое (subtrahend)

    Returns:
        Нормализованная разность

    Raises:
        ValueError: Если |a| < |b| (вызывающая сторона обязана сравнить
            и переставить операнды заранее)

    Examples:
        >>> subtract_magnitudes((4, 5, 6), (1, 2, 3))
        (3, 3, 3)
        >>> subtract_magnitudes((1, 0, 0), (1,))
        (9, 9)
    """
    if compare_magnitudes(a, b) < 0:
        raise ValueError(
            "Magnitude subtraction requires minuend >= subtrahend "
            f"(got {len(a)}-digit minuend smaller than {len(b)}-digit subtrahend)"
        )

    length = max(len(a), len(b))
    a_padded = pad_left(a, length)
    b_padded = pad_left(b, length)

    result = [0] * length
    borrow = 0
    for i in range(length - 1, -1, -1):
        diff = a_padded[i] - b_padded[i] - borrow
        if diff < 0:
            diff += RADIX
            borrow = 1
        else:
            borrow = 0
        result[i] = diff

    return strip_leading_zeros(result)


def double_magnitude(digits: Sequence[int]) -> Digits:
    """Удвоение модуля (digits + digits)."""
    return add_magnitudes(digits, digits)


def halve_magnitude(digits: Sequence[int]) -> Digits:
    """
    Целочисленное деление модуля на 2 (floor).

    Короткое деление от старшего разряда к младшему.

    Examples:
        >>> halve_magnitude((1, 5))
        (7,)
    """
    result = []
    remainder = 0
    for digit in digits:
        current = remainder * RADIX + digit
        result.append(current // 2)
        remainder = current % 2

    return strip_leading_zeros(result)

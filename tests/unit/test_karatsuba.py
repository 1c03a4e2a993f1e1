"""
Тесты для Karatsuba Multiplier

Проверяемые инварианты:
1. Karatsuba == schoolbook цифра-в-цифру (длины 1, 31, 32, 33, 100+)
2. Коммутативность и ассоциативность
3. Структурные нули (ведущие и младшие) не влияют на результат
4. Порог рекурсии настраивается и валидируется
"""

import random

import pytest

from bigint_rsa.core.math.karatsuba import (
    KARATSUBA_THRESHOLD,
    ArithmeticConfig,
    karatsuba_multiply,
    schoolbook_multiply,
)
from bigint_rsa.core.math.magnitude import ZERO_DIGITS


def random_digits(rng: random.Random, length: int) -> tuple:
    """Случайный модуль ровно из length цифр (без ведущего нуля)."""
    if length == 1:
        return (rng.randint(0, 9),)
    return (rng.randint(1, 9),) + tuple(rng.randint(0, 9) for _ in range(length - 1))


def to_int(digits) -> int:
    return int("".join(str(d) for d in digits))


# =============================================================================
# ТЕСТЫ: Schoolbook
# =============================================================================


class TestSchoolbookMultiply:
    """Тесты schoolbook_multiply как независимого эталона."""

    def test_basic(self):
        assert schoolbook_multiply((1, 2), (3, 4)) == (4, 0, 8)

    def test_single_digits(self):
        assert schoolbook_multiply((9,), (9,)) == (8, 1)
        assert schoolbook_multiply((3,), (3,)) == (9,)

    def test_zero(self):
        assert schoolbook_multiply((0,), (1, 2, 3)) == ZERO_DIGITS
        assert schoolbook_multiply((4, 5), (0, 0)) == ZERO_DIGITS

    def test_matches_int(self):
        rng = random.Random(3)
        for _ in range(50):
            a = random_digits(rng, rng.randint(1, 40))
            b = random_digits(rng, rng.randint(1, 40))
            assert to_int(schoolbook_multiply(a, b)) == to_int(a) * to_int(b)


# =============================================================================
# ТЕСТЫ: Karatsuba
# =============================================================================


class TestKaratsubaMultiply:
    """Тесты karatsuba_multiply."""

    def test_threshold_default(self):
        assert KARATSUBA_THRESHOLD == 32

    def test_twenty_nines_squared(self):
        nines = (9,) * 20
        expected = tuple(int(c) for c in "9999999999999999999800000000000000000001")
        assert karatsuba_multiply(nines, nines) == expected

    def test_single_digit_base_case(self):
        assert karatsuba_multiply((7,), (8,)) == (5, 6)
        assert karatsuba_multiply((2,), (3,)) == (6,)

    def test_zero_operand(self):
        assert karatsuba_multiply((0,), (1,) * 100) == ZERO_DIGITS
        assert karatsuba_multiply((0, 0, 0), (1, 2)) == ZERO_DIGITS

    def test_structural_zeros(self):
        assert karatsuba_multiply((1, 0, 0), (2, 0)) == (2, 0, 0, 0)
        assert karatsuba_multiply((0, 0, 1, 2), (0, 3, 4)) == (4, 0, 8)

    @pytest.mark.parametrize("length", [1, 2, 31, 32, 33, 64, 100, 150])
    def test_matches_schoolbook_across_threshold(self, length: int):
        """Karatsuba == schoolbook ниже, на и выше порога."""
        rng = random.Random(1000 + length)
        for _ in range(5):
            a = random_digits(rng, length)
            b = random_digits(rng, length)
            assert karatsuba_multiply(a, b) == schoolbook_multiply(a, b)

    def test_unbalanced_operands(self):
        rng = random.Random(21)
        for short_len, long_len in [(1, 120), (5, 80), (31, 33), (33, 200)]:
            a = random_digits(rng, short_len)
            b = random_digits(rng, long_len)
            assert karatsuba_multiply(a, b) == schoolbook_multiply(a, b)
            assert to_int(karatsuba_multiply(a, b)) == to_int(a) * to_int(b)

    @pytest.mark.parametrize("threshold", [1, 2, 5])
    def test_forced_recursion_matches_int(self, threshold: int):
        """Малый порог заставляет рекурсию доходить до одноразрядных операндов."""
        rng = random.Random(threshold)
        for _ in range(10):
            a = random_digits(rng, rng.randint(1, 70))
            b = random_digits(rng, rng.randint(1, 70))
            product = karatsuba_multiply(a, b, threshold=threshold)
            assert to_int(product) == to_int(a) * to_int(b)

    def test_commutative(self):
        rng = random.Random(5)
        for _ in range(10):
            a = random_digits(rng, rng.randint(30, 90))
            b = random_digits(rng, rng.randint(30, 90))
            assert karatsuba_multiply(a, b) == karatsuba_multiply(b, a)

    def test_associative(self):
        rng = random.Random(6)
        a = random_digits(rng, 40)
        b = random_digits(rng, 35)
        c = random_digits(rng, 50)
        left = karatsuba_multiply(karatsuba_multiply(a, b), c)
        right = karatsuba_multiply(a, karatsuba_multiply(b, c))
        assert left == right

    def test_inputs_not_mutated(self):
        a = [1, 2, 3] * 20
        b = [9, 8, 7] * 15
        a_copy, b_copy = list(a), list(b)
        karatsuba_multiply(a, b, threshold=4)
        assert a == a_copy
        assert b == b_copy

    def test_invalid_threshold(self):
        with pytest.raises(ValueError, match="threshold"):
            karatsuba_multiply((1,), (2,), threshold=0)


class TestArithmeticConfig:
    """Тесты ArithmeticConfig."""

    def test_default(self):
        assert ArithmeticConfig().karatsuba_threshold == KARATSUBA_THRESHOLD

    def test_invalid_threshold_rejected(self):
        with pytest.raises(ValueError, match="karatsuba_threshold"):
            ArithmeticConfig(karatsuba_threshold=0)

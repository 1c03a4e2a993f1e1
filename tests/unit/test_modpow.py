"""
Тесты для Modular Exponentiator (RSA примитив)

Проверяемые инварианты:
1. Textbook RSA round trip: 65 -> 2790 -> 65 (n = 3233)
2. Совпадение со встроенным pow(b, e, m)
3. Согласованность с наивным умножением в аккумулятор
4. Нулевой модуль -> DivisionByZero, отрицательный показатель -> ValueError
"""

import random

import pytest
from pydantic import ValidationError

from bigint_rsa.core.domain import BigInteger, modulus, multiply
from bigint_rsa.core.errors import DivisionByZero, InvalidFormat
from bigint_rsa.core.math.karatsuba import DEFAULT_ARITHMETIC_CONFIG, ArithmeticConfig
from bigint_rsa.rsa import RSAKey, encrypt_decrypt, mod_pow, rsa_transform
from bigint_rsa.rsa import modpow as modpow_module


def big(text: str) -> BigInteger:
    return BigInteger.parse(text)


@pytest.fixture
def textbook_key():
    """p = 61, q = 53: n = 3233, e = 17, d = 2753."""
    return {"n": 3233, "e": 17, "d": 2753}


@pytest.fixture
def medium_key():
    """Ключ на 18-значном модуле (p = 1000000007, q = 998244353)."""
    p, q = 1000000007, 998244353
    n = p * q
    e = 65537
    d = pow(e, -1, (p - 1) * (q - 1))
    return {"n": n, "e": e, "d": d}


# =============================================================================
# ТЕСТЫ: mod_pow
# =============================================================================


class TestModPow:
    """Тесты mod_pow: square-and-multiply."""

    def test_textbook_round_trip(self, textbook_key):
        cipher = mod_pow(big("65"), big("17"), big("3233"))
        assert str(cipher) == "2790"

        plain = mod_pow(cipher, big(str(textbook_key["d"])), big(str(textbook_key["n"])))
        assert str(plain) == "65"

    def test_accepts_int_and_text(self):
        assert str(mod_pow(4, 13, 497)) == "445"
        assert str(mod_pow("4", "13", "497")) == "445"

    def test_exponent_zero_returns_one(self):
        assert str(mod_pow(123, 0, 7)) == "1"

    def test_exponent_one_reduces_base(self):
        assert str(mod_pow(100, 1, 7)) == "2"

    def test_matches_builtin_pow(self):
        rng = random.Random(71)
        for _ in range(25):
            base = rng.randrange(0, 10**rng.randint(1, 15))
            exponent = rng.randrange(0, 10**rng.randint(1, 6))
            mod = rng.randrange(2, 10**rng.randint(1, 12))
            assert int(mod_pow(base, exponent, mod)) == pow(base, exponent, mod)

    def test_self_consistency_with_repeated_multiplication(self):
        """mod_pow(b, e, m) == (((1*b) mod m)*b mod m ...) e раз"""
        base = big("987654321987")
        mod = big("1000003")
        accumulator = BigInteger.one()
        for exponent in range(1, 13):
            accumulator = modulus(multiply(accumulator, base), mod)
            assert mod_pow(base, exponent, mod) == accumulator

    def test_modulus_beyond_karatsuba_threshold(self):
        """65-значный модуль: умножения идут через рекурсию Карацубы."""
        p = 2**127 - 1
        q = 2**89 - 1
        n = p * q
        message = 31415926535897932384626433832795028841971
        assert int(mod_pow(message, 65537, n)) == pow(message, 65537, n)

    def test_custom_config(self):
        config = ArithmeticConfig(karatsuba_threshold=2)
        assert str(mod_pow(65, 17, 3233, config=config)) == "2790"

    def test_negative_base_follows_dividend_sign(self):
        assert str(mod_pow(-2, 1, 5)) == "-2"
        assert str(mod_pow(-2, 2, 5)) == "4"

    def test_zero_modulus_rejected(self):
        with pytest.raises(DivisionByZero):
            mod_pow(5, 3, 0)

    def test_zero_modulus_rejected_even_for_zero_exponent(self):
        with pytest.raises(DivisionByZero):
            mod_pow(5, 0, "-0")

    def test_negative_exponent_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            mod_pow(5, -3, 7)

    def test_invalid_text_rejected(self):
        with pytest.raises(InvalidFormat):
            mod_pow("5", "3", "7x")


# =============================================================================
# ТЕСТЫ: RSA entry points
# =============================================================================


class TestRSAEntryPoints:
    """Тесты encrypt_decrypt / rsa_transform."""

    def test_encrypt_decrypt_is_mod_pow(self, textbook_key):
        cipher = encrypt_decrypt(65, textbook_key["e"], textbook_key["n"])
        assert str(cipher) == "2790"
        assert str(encrypt_decrypt(cipher, textbook_key["d"], textbook_key["n"])) == "65"

    def test_rsa_transform_text(self):
        assert rsa_transform("65", "17", "3233") == "2790"
        assert rsa_transform("2790", "2753", "3233") == "65"

    def test_rsa_transform_invalid(self):
        with pytest.raises(InvalidFormat):
            rsa_transform("", "17", "3233")

    def test_config_passed_to_multiply(self, monkeypatch):
        """encrypt_decrypt, rsa_transform и RSAKey.apply передают config в умножение."""
        config = ArithmeticConfig(karatsuba_threshold=2)
        seen = []

        def recording_multiply(a, b, used_config=DEFAULT_ARITHMETIC_CONFIG):
            seen.append(used_config)
            return multiply(a, b, used_config)

        monkeypatch.setattr(modpow_module, "multiply", recording_multiply)

        assert str(encrypt_decrypt(65, 17, 3233, config)) == "2790"
        assert rsa_transform("2790", "2753", "3233", config=config) == "65"
        assert str(RSAKey(exponent=17, modulus=3233).apply(65, config=config)) == "2790"

        assert seen
        assert all(used is config for used in seen)

    def test_medium_key_round_trip(self, medium_key):
        message = 123456789012345
        cipher = encrypt_decrypt(message, medium_key["e"], medium_key["n"])
        assert int(cipher) == pow(message, medium_key["e"], medium_key["n"])

        plain = encrypt_decrypt(cipher, medium_key["d"], medium_key["n"])
        assert int(plain) == message


class TestRSAKey:
    """Тесты RSAKey: валидация операндов."""

    def test_apply(self):
        public = RSAKey(exponent=17, modulus=3233)
        private = RSAKey(exponent="2753", modulus="3233")
        assert str(public.apply(65)) == "2790"
        assert str(private.apply(public.apply(65))) == "65"

    def test_accepts_big_integer(self):
        key = RSAKey(exponent=big("17"), modulus=big("3233"))
        assert key.modulus == big("3233")

    def test_zero_modulus_rejected(self):
        with pytest.raises(ValidationError, match="modulus must be positive"):
            RSAKey(exponent=17, modulus=0)

    def test_negative_modulus_rejected(self):
        with pytest.raises(ValidationError):
            RSAKey(exponent=17, modulus=-3233)

    def test_negative_exponent_rejected(self):
        with pytest.raises(ValidationError, match="exponent must be non-negative"):
            RSAKey(exponent=-17, modulus=3233)

    def test_invalid_text_rejected(self):
        with pytest.raises(ValidationError):
            RSAKey(exponent="seventeen", modulus=3233)

    def test_frozen(self):
        key = RSAKey(exponent=17, modulus=3233)
        with pytest.raises(ValidationError):
            key.exponent = big("3")  # type: ignore[misc]

"""
Тесты для Text Codec (текст <-> BigInteger)
"""

import pytest

from bigint_rsa.codec import decode_text, encode_text
from bigint_rsa.core.domain import BigInteger
from bigint_rsa.rsa import mod_pow


class TestEncodeText:
    """Тесты encode_text."""

    def test_hello(self):
        assert str(encode_text("Hello")) == "310939249775"

    def test_empty_is_zero(self):
        assert encode_text("") == BigInteger.zero()

    def test_result_non_negative(self):
        assert encode_text("\xff€").negative is False


class TestDecodeText:
    """Тесты decode_text."""

    def test_hello(self):
        assert decode_text(BigInteger.parse("310939249775")) == "Hello"

    def test_zero_is_empty(self):
        assert decode_text(BigInteger.zero()) == ""

    def test_odd_hex_length_padded(self):
        # 9 -> "9" -> "09" -> "\t"
        assert decode_text(BigInteger.parse("9")) == "\t"

    def test_invalid_utf8_replaced(self):
        # 255 -> 0xFF, не валидный UTF-8
        assert decode_text(BigInteger.parse("255")) == "�"

    def test_negative_rejected(self):
        with pytest.raises(ValueError, match="negative"):
            decode_text(BigInteger.parse("-42"))


class TestRoundTrip:
    """Round trip текста, в том числе через RSA."""

    @pytest.mark.parametrize("text", ["a", "Hello, World!", "Привет, мир", "✓ 中文"])
    def test_round_trip(self, text):
        assert decode_text(encode_text(text)) == text

    def test_leading_nul_lost(self):
        assert decode_text(encode_text("\x00a")) == "a"

    def test_rsa_round_trip(self):
        p, q = 1000000007, 998244353
        n = p * q
        e = 65537
        d = pow(e, -1, (p - 1) * (q - 1))

        message = encode_text("Hi!")
        cipher = mod_pow(message, e, n)
        assert decode_text(mod_pow(cipher, d, n)) == "Hi!"


class TestLongText:
    """Тексты, кодируемые числами длиннее 4300 десятичных цифр."""

    def test_long_ascii_round_trip(self):
        text = "a" * 2000
        encoded = encode_text(text)
        assert len(encoded.digits) > 4300
        assert decode_text(encoded) == text

    def test_long_unicode_round_trip(self):
        text = "Привет, мир ✓ " * 300
        assert decode_text(encode_text(text)) == text

    def test_decode_long_value(self):
        decoded = decode_text(BigInteger.parse("1" * 5000))
        assert isinstance(decoded, str)
        assert decoded

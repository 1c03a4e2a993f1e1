"""
Text Codec — текст <-> BigInteger через UTF-8 и hex

Кодирование:
    "Hello" -> UTF-8 [72, 101, 108, 108, 111] -> hex "48656C6C6F"
            -> значение числа 0x48656C6C6F -> BigInteger("310939249775")

Декодирование выполняет обратные шаги. Hex-запись нечётной длины
дополняется ведущим '0'.

ОГРАНИЧЕНИЯ:
1. Ведущие нулевые байты (NUL) не переживают round trip
2. Невалидный UTF-8 при декодировании заменяется на U+FFFD
3. Отрицательные значения не декодируются (ValueError)

Длина текста не ограничена: hex <-> int выполняется по основанию 16
(вне лимита int_max_str_digits), а int <-> BigInteger идёт блоками.
"""

from bigint_rsa.core.domain.big_integer import BigInteger


def encode_text(text: str) -> BigInteger:
    """
    Кодирование текста в BigInteger.

    Args:
        text: Произвольный текст (пустой -> 0)

    Returns:
        Неотрицательный BigInteger

    Examples:
        >>> str(encode_text("Hello"))
        '310939249775'
    """
    data = text.encode("utf-8")
    if not data:
        return BigInteger.zero()

    hex_numeral = data.hex().upper()
    return BigInteger.from_int(int(hex_numeral, 16))


def decode_text(value: BigInteger) -> str:
    """
    Декодирование BigInteger обратно в текст.

    Args:
        value: Неотрицательный BigInteger (0 -> "")

    Returns:
        Текст; невалидные UTF-8 последовательности заменяются на U+FFFD

    Raises:
        ValueError: Если value < 0

    Examples:
        >>> decode_text(BigInteger.parse("310939249775"))
        'Hello'
    """
    if value.negative:
        raise ValueError(f"Cannot decode negative value as text: {value}")
    if value.is_zero():
        return ""

    hex_numeral = format(int(value), "X")
    if len(hex_numeral) % 2:
        hex_numeral = "0" + hex_numeral

    return bytes.fromhex(hex_numeral).decode("utf-8", errors="replace")

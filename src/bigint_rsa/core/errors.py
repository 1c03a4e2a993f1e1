"""
Errors — иерархия исключений арифметического ядра.

Все ошибки являются ошибками входных данных вызывающей стороны:
арифметика детерминирована, повторы и восстановление не предусмотрены.
"""


class BigIntegerError(Exception):
    """Базовое исключение для всех ошибок BigInteger арифметики."""

    pass


class InvalidFormat(BigIntegerError, ValueError):
    """
    Некорректная десятичная запись при парсинге.

    Допустимый формат: необязательный ведущий '-', затем одна или более
    ASCII цифр 0-9. Пустая строка, '+', разделители и экспонента запрещены.
    """

    pass


class DivisionByZero(BigIntegerError, ZeroDivisionError):
    """
    Делитель равен нулю (divide / modulus / mod_pow).

    Наследует ZeroDivisionError, чтобы вызывающий код мог ловить
    стандартное исключение Python.
    """

    pass

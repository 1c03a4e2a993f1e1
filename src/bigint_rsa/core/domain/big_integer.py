"""
BigInteger — Знаковое целое произвольной точности

Immutable Pydantic модель, представляющая знаковое целое число
неограниченной длины в виде десятичных цифр.

Операции делегируются беззнаковой арифметике (core.math) и затем
к результату присоединяется знак:
- add / subtract: знаковая диспетчеризация поверх add/subtract_magnitudes
- multiply: Карацуба, знак = XOR знаков операндов
- divide / modulus: doubling division, усечённое (truncated) деление

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нет ведущих нулей, кроме самого нуля, который хранится как (0,)
2. Ноль всегда неотрицателен (negative=False)
3. Экземпляр никогда не изменяется после создания (frozen=True);
   каждая операция возвращает новый экземпляр
4. Деление: a = q * b + r, |r| < |b|, sign(q) = sign(a) XOR sign(b),
   sign(r) = sign(a)
"""

from typing import Any, Final, List, NamedTuple, Optional, Sequence, Union

from pydantic import BaseModel, Field, model_validator

from bigint_rsa.core.errors import InvalidFormat
from bigint_rsa.core.math.division import divide_magnitudes
from bigint_rsa.core.math.karatsuba import (
    DEFAULT_ARITHMETIC_CONFIG,
    ArithmeticConfig,
    karatsuba_multiply,
)
from bigint_rsa.core.math.magnitude import (
    ONE_DIGITS,
    ZERO_DIGITS,
    add_magnitudes,
    compare_magnitudes,
    halve_magnitude,
    strip_leading_zeros,
    subtract_magnitudes,
)

_DECIMAL_DIGITS = frozenset("0123456789")

# Перевод int <-> цифры блоками по 18 разрядов: str(int) / int(str) на
# всём числе упираются в лимит sys.set_int_max_str_digits (4300 цифр)
_CHUNK_DIGITS: Final[int] = 18
_CHUNK_BASE: Final[int] = 10**_CHUNK_DIGITS


# =============================================================================
# BIGINTEGER MODEL
# =============================================================================


class BigInteger(BaseModel):
    """
    Знаковое целое произвольной точности.

    Immutable модель (frozen=True). Цифры хранятся старшим разрядом
    первым: -1234 -> negative=True, digits=(1, 2, 3, 4).

    Создание:
        BigInteger.parse("-1234")
        BigInteger.from_digits([0, 1, 2], is_negative=False)  # -> 12
        BigInteger.from_int(42)
    """

    negative: bool = Field(default=False, description="True тогда и только тогда, когда значение < 0")
    digits: tuple[int, ...] = Field(
        default=ZERO_DIGITS,
        min_length=1,
        description="Десятичные цифры модуля, старший разряд первым",
    )

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="before")
    @classmethod
    def normalize(cls, data: Any) -> Any:
        """
        Нормализация: удаление ведущих нулей, ноль всегда неотрицателен.

        Выполняется над копией входной последовательности.
        """
        if not isinstance(data, dict):
            return data

        digits = strip_leading_zeros(tuple(data.get("digits", ZERO_DIGITS)))
        negative = bool(data.get("negative", False)) and digits != ZERO_DIGITS
        return {**data, "digits": digits, "negative": negative}

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "BigInteger":
        """
        Парсинг десятичной записи.

        Формат: необязательный '-', затем одна или более цифр 0-9.

        Args:
            text: Десятичная запись

        Returns:
            Нормализованный BigInteger ("-0" -> 0, "007" -> 7)

        Raises:
            InvalidFormat: Пустая строка, None, или недопустимый символ

        Examples:
            >>> str(BigInteger.parse("-00123"))
            '-123'
        """
        if not isinstance(text, str) or not text:
            raise InvalidFormat("Number cannot be null or empty")

        negative = text[0] == "-"
        body = text[1:] if negative else text

        if not body:
            raise InvalidFormat(f"Invalid number format: {text!r} has no digits")

        for position, char in enumerate(body, start=2 if negative else 1):
            if char not in _DECIMAL_DIGITS:
                raise InvalidFormat(
                    f"Invalid number format: {text!r} (unexpected {char!r} at position {position})"
                )

        return cls(negative=negative, digits=tuple(ord(c) - 48 for c in body))

    @classmethod
    def from_digits(cls, digits: Sequence[int], is_negative: bool = False) -> "BigInteger":
        """
        Создание из последовательности цифр (старший разряд первым) и знака.

        Ведущие нули удаляются, знак нуля сбрасывается. Диапазон цифр
        не проверяется (внутреннее использование).
        """
        return cls(negative=is_negative, digits=tuple(digits))

    @classmethod
    def from_int(cls, value: int) -> "BigInteger":
        """
        Создание из встроенного int Python.

        Значение раскладывается divmod на блоки по 10^18, каждый блок
        даёт ровно 18 цифр; длина значения не ограничена.

        Examples:
            >>> len(BigInteger.from_int(10**5000).digits)
            5001
        """
        number = int(value)
        negative = number < 0
        remaining = -number if negative else number

        chunks: List[int] = []
        while True:
            remaining, chunk = divmod(remaining, _CHUNK_BASE)
            chunks.append(chunk)
            if not remaining:
                break

        digits: List[int] = []
        for chunk in reversed(chunks):
            digits.extend(ord(c) - 48 for c in f"{chunk:0{_CHUNK_DIGITS}d}")
        return cls(negative=negative, digits=tuple(digits))

    @classmethod
    def zero(cls) -> "BigInteger":
        return cls(negative=False, digits=ZERO_DIGITS)

    @classmethod
    def one(cls) -> "BigInteger":
        return cls(negative=False, digits=ONE_DIGITS)

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.digits == ZERO_DIGITS

    def is_even(self) -> bool:
        """True если младшая цифра чётная."""
        return self.digits[-1] % 2 == 0

    def to_string(self) -> str:
        """Каноническая десятичная запись: "0" для нуля, без ведущих нулей."""
        body = "".join(chr(48 + d) for d in self.digits)
        return "-" + body if self.negative else body

    # -------------------------------------------------------------------------
    # Производные значения
    # -------------------------------------------------------------------------

    def negate(self) -> "BigInteger":
        return BigInteger(negative=not self.negative, digits=self.digits)

    def abs(self) -> "BigInteger":
        return BigInteger(negative=False, digits=self.digits)

    def halve(self) -> "BigInteger":
        """Усечённое деление на 2 (для неотрицательных = floor)."""
        return BigInteger(negative=self.negative, digits=halve_magnitude(self.digits))

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigInteger({self.to_string()!r})"

    def __int__(self) -> int:
        # Horner по блокам до 18 цифр
        result = 0
        for start in range(0, len(self.digits), _CHUNK_DIGITS):
            chunk = self.digits[start : start + _CHUNK_DIGITS]
            value = 0
            for digit in chunk:
                value = value * 10 + digit
            result = result * 10 ** len(chunk) + value
        return -result if self.negative else result

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __hash__(self) -> int:
        # Согласован с int: BigInteger(5) == 5 -> hash(BigInteger(5)) == hash(5)
        return hash(int(self))

    def __eq__(self, other: object) -> bool:
        other_value = _coerce_operand(other)
        if other_value is None:
            return NotImplemented
        return self.negative == other_value.negative and self.digits == other_value.digits

    def __lt__(self, other: object) -> bool:
        other_value = _coerce_operand(other)
        if other_value is None:
            return NotImplemented
        return compare(self, other_value) < 0

    def __le__(self, other: object) -> bool:
        other_value = _coerce_operand(other)
        if other_value is None:
            return NotImplemented
        return compare(self, other_value) <= 0

    def __gt__(self, other: object) -> bool:
        other_value = _coerce_operand(other)
        if other_value is None:
            return NotImplemented
        return compare(self, other_value) > 0

    def __ge__(self, other: object) -> bool:
        other_value = _coerce_operand(other)
        if other_value is None:
            return NotImplemented
        return compare(self, other_value) >= 0

    def __neg__(self) -> "BigInteger":
        return self.negate()

    def __abs__(self) -> "BigInteger":
        return self.abs()

    def __add__(self, other: object) -> "BigInteger":
        other_value = _coerce_operand(other)
        if other_value is None:
            return NotImplemented
        return add(self, other_value)

    def __radd__(self, other: object) -> "BigInteger":
        other_value = _coerce_operand(other)
        if other_value is None:
            return NotImplemented
        return add(other_value, self)

    def __sub__(self, other: object) -> "BigInteger":
        other_value = _coerce_operand(other)
        if other_value is None:
            return NotImplemented
        return subtract(self, other_value)

    def __rsub__(self, other: object) -> "BigInteger":
        other_value = _coerce_operand(other)
        if other_value is None:
            return NotImplemented
        return subtract(other_value, self)

    def __mul__(self, other: object) -> "BigInteger":
        other_value = _coerce_operand(other)
        if other_value is None:
            return NotImplemented
        return multiply(self, other_value)

    def __rmul__(self, other: object) -> "BigInteger":
        other_value = _coerce_operand(other)
        if other_value is None:
            return NotImplemented
        return multiply(other_value, self)


BigIntegerLike = Union[BigInteger, int, str]


def _coerce(value: object) -> Optional[BigInteger]:
    """Приведение BigInteger / int / str к BigInteger (None если тип не поддержан)."""
    if isinstance(value, BigInteger):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return BigInteger.from_int(value)
    if isinstance(value, str):
        return BigInteger.parse(value)
    return None


def _coerce_operand(value: object) -> Optional[BigInteger]:
    """
    Приведение операнда операторов Python (==, <, +, ...).

    Только BigInteger и int: с int совпадают и равенство, и hash.
    Десятичные строки принимает as_big_integer, но не операторы.
    """
    if isinstance(value, str):
        return None
    return _coerce(value)


def as_big_integer(value: BigIntegerLike) -> BigInteger:
    """
    Приведение BigInteger / int / десятичной строки к BigInteger.

    Raises:
        InvalidFormat: Некорректная строка
        TypeError: Неподдерживаемый тип
    """
    result = _coerce(value)
    if result is None:
        raise TypeError(f"Cannot convert {type(value).__name__} to BigInteger")
    return result


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_magnitude(a: BigInteger, b: BigInteger) -> int:
    """
    Сравнение модулей |a| и |b|.

    Returns:
        -1, 0 или 1
    """
    return compare_magnitudes(a.digits, b.digits)


def compare(a: BigInteger, b: BigInteger) -> int:
    """
    Знаковое сравнение a и b.

    Returns:
        -1 если a < b, 0 если a == b, 1 если a > b
    """
    if a.negative != b.negative:
        return -1 if a.negative else 1

    magnitude_order = compare_magnitudes(a.digits, b.digits)
    return -magnitude_order if a.negative else magnitude_order


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def add(a: BigInteger, b: BigInteger) -> BigInteger:
    """
    Знаковое сложение.

    - Одинаковые знаки: сумма модулей, знак сохраняется
    - Разные знаки: из большего модуля вычитается меньший,
      знак берётся у операнда с большим модулем (равенство -> 0)

    Examples:
        >>> str(add(BigInteger.parse("123"), BigInteger.parse("456")))
        '579'
        >>> str(add(BigInteger.parse("-5"), BigInteger.parse("3")))
        '-2'
    """
    if a.negative == b.negative:
        return BigInteger(negative=a.negative, digits=add_magnitudes(a.digits, b.digits))

    order = compare_magnitudes(a.digits, b.digits)
    if order == 0:
        return BigInteger.zero()
    if order > 0:
        return BigInteger(negative=a.negative, digits=subtract_magnitudes(a.digits, b.digits))
    return BigInteger(negative=b.negative, digits=subtract_magnitudes(b.digits, a.digits))


def subtract(a: BigInteger, b: BigInteger) -> BigInteger:
    """Вычитание: a - b = add(a, -b)."""
    return add(a, b.negate())


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply(
    a: BigInteger,
    b: BigInteger,
    config: ArithmeticConfig = DEFAULT_ARITHMETIC_CONFIG,
) -> BigInteger:
    """
    Умножение алгоритмом Карацубы.

    Знак = XOR знаков операндов; при нулевом модуле результат неотрицателен.

    Args:
        a: Первый множитель
        b: Второй множитель
        config: Параметры арифметики (порог schoolbook)
    """
    digits = karatsuba_multiply(a.digits, b.digits, threshold=config.karatsuba_threshold)
    return BigInteger(negative=a.negative != b.negative, digits=digits)


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


class DivisionResult(NamedTuple):
    """Частное и остаток усечённого деления."""

    quotient: BigInteger
    remainder: BigInteger


def divide(a: BigInteger, b: BigInteger) -> DivisionResult:
    """
    Усечённое деление с остатком.

    - sign(quotient) = sign(a) XOR sign(b)
    - sign(remainder) = sign(a)
    - a = quotient * b + remainder, |remainder| < |b|

    Raises:
        DivisionByZero: Если b == 0

    Examples:
        >>> q, r = divide(BigInteger.parse("100"), BigInteger.parse("3"))
        >>> (str(q), str(r))
        ('33', '1')
        >>> q, r = divide(BigInteger.parse("-7"), BigInteger.parse("2"))
        >>> (str(q), str(r))
        ('-3', '-1')
    """
    quotient, remainder = divide_magnitudes(a.digits, b.digits)
    return DivisionResult(
        quotient=BigInteger(negative=a.negative != b.negative, digits=quotient),
        remainder=BigInteger(negative=a.negative, digits=remainder),
    )


def modulus(a: BigInteger, b: BigInteger) -> BigInteger:
    """
    Остаток усечённого деления (знак делимого).

    Raises:
        DivisionByZero: Если b == 0
    """
    return divide(a, b).remainder

"""
Modular Exponentiator — RSA примитив c = m^k mod n

Square-and-multiply поверх операций BigInteger:

    result = 1; b = base
    пока exponent != 0:
        если exponent нечётный: result = (result * b) mod modulus
        b = (b * b) mod modulus
        exponent = floor(exponent / 2)

Шифрование и расшифрование RSA — одна и та же операция; различие между
открытым и закрытым ключом лежит на вызывающей стороне.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. modulus == 0 -> DivisionByZero (в том числе при exponent == 0)
2. exponent < 0 -> ValueError
3. O(log2(exponent)) шагов умножение + редукция, каждый операнд
   умножения по модулю меньше |modulus|
"""

import logging
from typing import Any

from pydantic import BaseModel, Field, field_validator

from bigint_rsa.core.domain.big_integer import (
    BigInteger,
    BigIntegerLike,
    as_big_integer,
    modulus as reduce_modulo,
    multiply,
)
from bigint_rsa.core.errors import DivisionByZero
from bigint_rsa.core.math.karatsuba import DEFAULT_ARITHMETIC_CONFIG, ArithmeticConfig

logger = logging.getLogger(__name__)


# =============================================================================
# MODULAR EXPONENTIATION
# =============================================================================


def mod_pow(
    base: BigIntegerLike,
    exponent: BigIntegerLike,
    modulus: BigIntegerLike,
    config: ArithmeticConfig = DEFAULT_ARITHMETIC_CONFIG,
) -> BigInteger:
    """
    Быстрое возведение в степень по модулю.

    Args:
        base: Основание (BigInteger, int или десятичная строка)
        exponent: Показатель (>= 0)
        modulus: Модуль (!= 0)
        config: Параметры арифметики

    Returns:
        base^exponent mod modulus. При exponent == 0 возвращается 1 без
        редукции. Знак результата следует усечённому остатку (знак делимого).

    Raises:
        DivisionByZero: Если modulus == 0
        ValueError: Если exponent < 0
        InvalidFormat: Если строковый аргумент некорректен

    Examples:
        >>> str(mod_pow(65, 17, 3233))
        '2790'
        >>> str(mod_pow(2790, 2753, 3233))
        '65'
    """
    base_value = as_big_integer(base)
    exponent_value = as_big_integer(exponent)
    modulus_value = as_big_integer(modulus)

    if modulus_value.is_zero():
        raise DivisionByZero("Modulus cannot be zero")

    if exponent_value.negative:
        raise ValueError(f"Exponent must be non-negative, got {exponent_value}")

    logger.debug(
        "mod_pow start",
        extra={
            "base_digits": len(base_value.digits),
            "exponent_digits": len(exponent_value.digits),
            "modulus_digits": len(modulus_value.digits),
        },
    )

    result = BigInteger.one()
    running = base_value
    steps = 0

    while not exponent_value.is_zero():
        if not exponent_value.is_even():
            result = reduce_modulo(multiply(result, running, config), modulus_value)

        running = reduce_modulo(multiply(running, running, config), modulus_value)
        exponent_value = exponent_value.halve()
        steps += 1

    logger.debug("mod_pow done", extra={"steps": steps, "result_digits": len(result.digits)})
    return result


def encrypt_decrypt(
    message: BigIntegerLike,
    exponent: BigIntegerLike,
    modulus: BigIntegerLike,
    config: ArithmeticConfig = DEFAULT_ARITHMETIC_CONFIG,
) -> BigInteger:
    """RSA шифрование/расшифрование: message^exponent mod modulus."""
    return mod_pow(message, exponent, modulus, config)


def rsa_transform(
    message_text: str,
    exponent_text: str,
    modulus_text: str,
    config: ArithmeticConfig = DEFAULT_ARITHMETIC_CONFIG,
) -> str:
    """
    RSA преобразование над десятичными строками.

    Raises:
        InvalidFormat: Если любой аргумент не является десятичной записью
        DivisionByZero: Если модуль равен нулю
    """
    message = BigInteger.parse(message_text)
    exponent = BigInteger.parse(exponent_text)
    modulus = BigInteger.parse(modulus_text)
    return str(mod_pow(message, exponent, modulus, config))


# =============================================================================
# RSA KEY
# =============================================================================


class RSAKey(BaseModel):
    """
    RSA ключ (открытый или закрытый): показатель и модуль.

    Immutable модель. Генерация ключей и padding вне зоны ответственности;
    модель только проверяет операнды перед возведением в степень.
    """

    exponent: BigInteger = Field(..., description="Показатель (e или d), >= 0")
    modulus: BigInteger = Field(..., description="Модуль n = p * q, > 0")

    model_config = {"frozen": True}  # Immutable

    @field_validator("exponent", "modulus", mode="before")
    @classmethod
    def coerce_operand(cls, v: Any) -> Any:
        """Приём int и десятичных строк наравне с BigInteger."""
        if isinstance(v, (int, str)) and not isinstance(v, bool):
            return as_big_integer(v)
        return v

    @field_validator("exponent")
    @classmethod
    def validate_exponent(cls, v: BigInteger) -> BigInteger:
        if v.negative:
            raise ValueError(f"RSA exponent must be non-negative, got {v}")
        return v

    @field_validator("modulus")
    @classmethod
    def validate_modulus(cls, v: BigInteger) -> BigInteger:
        if v.negative or v.is_zero():
            raise ValueError(f"RSA modulus must be positive, got {v}")
        return v

    def apply(
        self,
        message: BigIntegerLike,
        config: ArithmeticConfig = DEFAULT_ARITHMETIC_CONFIG,
    ) -> BigInteger:
        """Применение ключа: message^exponent mod modulus."""
        return mod_pow(message, self.exponent, self.modulus, config)

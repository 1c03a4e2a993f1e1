"""
Domain models and value objects.

Contains the BigInteger value type and its signed operations.
"""

from bigint_rsa.core.domain.big_integer import (
    BigInteger,
    BigIntegerLike,
    DivisionResult,
    add,
    as_big_integer,
    compare,
    compare_magnitude,
    divide,
    modulus,
    multiply,
    subtract,
)

__all__ = [
    # Value type
    "BigInteger",
    "BigIntegerLike",
    "DivisionResult",
    # Coercion
    "as_big_integer",
    # Comparison
    "compare",
    "compare_magnitude",
    # Arithmetic
    "add",
    "subtract",
    "multiply",
    "divide",
    "modulus",
]

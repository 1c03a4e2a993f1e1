"""
RSA — модульное возведение в степень поверх BigInteger.

Генерация ключей и padding не реализуются: модуль только возводит
заданные операнды в степень.
"""

from .modpow import (
    RSAKey,
    encrypt_decrypt,
    mod_pow,
    rsa_transform,
)

__all__ = [
    "RSAKey",
    "encrypt_decrypt",
    "mod_pow",
    "rsa_transform",
]

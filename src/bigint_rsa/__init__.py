"""
bigint_rsa — Arbitrary-precision decimal integers и RSA modular exponentiation.

Пакет реализует знаковые целые числа неограниченной длины поверх
последовательностей десятичных цифр и строит на них RSA-примитив
c = m^k mod n.
"""

__version__ = "1.0.0"

"""
Core arithmetic engine: digit-sequence math, BigInteger value type, errors.

Модули ядра не зависят от ввода/вывода и внешних систем.
"""

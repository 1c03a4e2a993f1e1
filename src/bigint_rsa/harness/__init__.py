"""
Harness — пакетный прогон RSA заданий из текстового или JSON ввода.
"""

from .batch import (
    BatchSummary,
    HarnessConfig,
    HarnessInputError,
    RSACase,
    main,
    read_text_cases,
    run_batch,
    run_case,
)

__all__ = [
    "BatchSummary",
    "HarnessConfig",
    "HarnessInputError",
    "RSACase",
    "main",
    "read_text_cases",
    "run_batch",
    "run_case",
]

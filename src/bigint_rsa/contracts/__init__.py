"""
Contract Validation Module

Валидация JSON контрактов пакетного режима bigint_rsa.
"""

from .validators import (
    ContractValidator,
    RSAJobValidator,
    RSAResultValidator,
    SchemaLoader,
    validate_rsa_job,
    validate_rsa_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "RSAJobValidator",
    "RSAResultValidator",
    # Functions
    "validate_rsa_job",
    "validate_rsa_result",
]

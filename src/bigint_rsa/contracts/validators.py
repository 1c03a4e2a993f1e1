"""
JSON Schema Contract Validators

Модуль для валидации JSON данных пакетного режима согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы (contracts/schema/):
- rsa_job.json: входное задание (modulus, exponent, message, mode)
- rsa_result.json: результат задания (ok/error)
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self):
        self._schema_dir = Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'rsa_job')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        return self.validator.iter_errors(data)


class RSAJobValidator(ContractValidator):
    """Валидатор входного задания пакетного режима."""

    def __init__(self):
        super().__init__("rsa_job")


class RSAResultValidator(ContractValidator):
    """Валидатор результата задания."""

    def __init__(self):
        super().__init__("rsa_result")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_rsa_job(data: Dict[str, Any]) -> None:
    """
    Валидация входного задания.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    RSAJobValidator().validate(data)


def validate_rsa_result(data: Dict[str, Any]) -> None:
    """
    Валидация результата задания.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    RSAResultValidator().validate(data)

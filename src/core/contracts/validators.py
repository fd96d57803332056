"""
JSON Schema Contract Validators

Модуль для валидации JSON документов конфигурации согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema (Draft 2020-12).

Схемы:
- rsa_key_config.json (модуль и экспоненты RSA как строки цифр)
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

    Находит схемы в contracts/schema/ относительно корня проекта.
    """

    def __init__(self):
        # Корень проекта: 4 уровня вверх от этого файла
        self._schema_dir = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла (с кэшированием).

        Args:
            schema_name: Имя схемы без расширения (например, 'rsa_key_config')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема сама по себе невалидна
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # meta-validation
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

    Инкапсулирует логику валидации данных против JSON Schema.
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


class RSAKeyConfigValidator(ContractValidator):
    """Валидатор для rsa_key_config контракта."""

    def __init__(self):
        super().__init__("rsa_key_config")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_rsa_key_config(data: Dict[str, Any]) -> None:
    """
    Валидация документа конфигурации ключей.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    RSAKeyConfigValidator().validate(data)

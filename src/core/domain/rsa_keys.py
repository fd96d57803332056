"""
RSA Keys — конфигурация ключевого материала

Модуль, экспонента шифрования и экспонента расшифровки задаются извне
(JSON файл, переменные окружения или mapping) как строки десятичных цифр
и передаются в LineProtocol явно. В исходниках реальных ключей нет.

Immutable Pydantic модель RSAKeyConfig валидирует строки при загрузке;
RSAKeyMaterial — те же значения, уже разобранные в DecimalBigInt.

Генерация и проверка математической корректности ключей (p, q, phi)
не выполняется.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final, Mapping, Optional, Union

from jsonschema import ValidationError as SchemaValidationError
from pydantic import BaseModel, Field, ValidationError, field_validator

from src.core.contracts import validate_rsa_key_config
from src.core.errors import KeyConfigError
from src.core.math.decimal_bigint import DecimalBigInt

# =============================================================================
# ПЕРЕМЕННЫЕ ОКРУЖЕНИЯ
# =============================================================================

ENV_MODULUS: Final[str] = "RSA_MODULUS"
ENV_PUBLIC_EXPONENT: Final[str] = "RSA_PUBLIC_EXPONENT"
ENV_PRIVATE_EXPONENT: Final[str] = "RSA_PRIVATE_EXPONENT"


# =============================================================================
# KEY MATERIAL
# =============================================================================


@dataclass(frozen=True)
class RSAKeyMaterial:
    """Разобранный ключевой материал."""

    modulus: DecimalBigInt
    public_exponent: DecimalBigInt
    private_exponent: DecimalBigInt


# =============================================================================
# KEY CONFIG MODEL
# =============================================================================


class RSAKeyConfig(BaseModel):
    """
    Конфигурация RSA ключей.

    Immutable модель (frozen=True). Все поля — непустые строки ASCII цифр;
    модуль не может быть нулём.
    """

    modulus: str = Field(..., min_length=1, description="RSA модуль n")
    public_exponent: str = Field(..., min_length=1, description="Экспонента шифрования e")
    private_exponent: str = Field(..., min_length=1, description="Экспонента расшифровки d")

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("modulus", "public_exponent", "private_exponent")
    @classmethod
    def validate_decimal_digits(cls, v: str) -> str:
        """Только ASCII цифры (str.isdigit пропускает '²' и прочие)."""
        if not v.isascii() or not v.isdigit():
            raise ValueError(f"expected decimal digits, got {v[:32]!r}")
        return v

    @field_validator("modulus")
    @classmethod
    def validate_modulus_non_zero(cls, v: str) -> str:
        if not v.strip("0"):
            raise ValueError("modulus must be non-zero")
        return v

    def to_key_material(self) -> RSAKeyMaterial:
        return RSAKeyMaterial(
            modulus=DecimalBigInt(self.modulus),
            public_exponent=DecimalBigInt(self.public_exponent),
            private_exponent=DecimalBigInt(self.private_exponent),
        )

    # -------------------------------------------------------------------------
    # Источники конфигурации
    # -------------------------------------------------------------------------

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RSAKeyConfig":
        """
        Построение из mapping.

        Raises:
            KeyConfigError: Если поля отсутствуют или невалидны
        """
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise KeyConfigError(f"Invalid RSA key configuration: {e}") from e

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "RSAKeyConfig":
        """
        Загрузка из JSON файла.

        Документ сначала проверяется по контракту rsa_key_config.json,
        затем валидируется моделью.

        Raises:
            KeyConfigError: Если файл не читается, не JSON или не по контракту
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise KeyConfigError(f"Cannot read key file {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise KeyConfigError(f"Key file {path} is not valid JSON: {e}") from e

        try:
            validate_rsa_key_config(data)
        except SchemaValidationError as e:
            raise KeyConfigError(f"Key file {path} violates contract: {e.message}") from e

        return cls.from_mapping(data)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RSAKeyConfig":
        """
        Загрузка из переменных окружения RSA_MODULUS, RSA_PUBLIC_EXPONENT,
        RSA_PRIVATE_EXPONENT.

        Args:
            environ: Окружение (default: os.environ)

        Raises:
            KeyConfigError: Если переменная не задана или невалидна
        """
        if environ is None:
            environ = os.environ

        names = {
            "modulus": ENV_MODULUS,
            "public_exponent": ENV_PUBLIC_EXPONENT,
            "private_exponent": ENV_PRIVATE_EXPONENT,
        }
        missing = [env_name for env_name in names.values() if env_name not in environ]
        if missing:
            raise KeyConfigError(f"Missing environment variables: {', '.join(missing)}")

        return cls.from_mapping({field: environ[env_name].strip() for field, env_name in names.items()})


def load_key_material(path: Union[str, Path, None] = None) -> RSAKeyMaterial:
    """
    Загрузка ключевого материала: из JSON файла, если path задан,
    иначе из переменных окружения.
    """
    if path is not None:
        return RSAKeyConfig.from_json_file(path).to_key_material()
    return RSAKeyConfig.from_env().to_key_material()

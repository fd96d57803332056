"""
Contract Validation Module

Модуль для валидации JSON контрактов конфигурации decimal-rsa.
"""

from .validators import (
    ContractValidator,
    RSAKeyConfigValidator,
    SchemaLoader,
    validate_rsa_key_config,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "RSAKeyConfigValidator",
    # Functions
    "validate_rsa_key_config",
]

"""
Domain models and value objects.

Contains the RSA key configuration and parsed key material.
"""

from src.core.domain.rsa_keys import (
    ENV_MODULUS,
    ENV_PRIVATE_EXPONENT,
    ENV_PUBLIC_EXPONENT,
    RSAKeyConfig,
    RSAKeyMaterial,
    load_key_material,
)

__all__ = [
    # Environment variable names
    "ENV_MODULUS",
    "ENV_PUBLIC_EXPONENT",
    "ENV_PRIVATE_EXPONENT",
    # Models
    "RSAKeyConfig",
    "RSAKeyMaterial",
    # Functions
    "load_key_material",
]

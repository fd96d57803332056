"""
Core math modules для decimal-rsa

Десятичная арифметика произвольной точности и модульное возведение в степень.
"""

# DecimalBigInt
from src.core.math.decimal_bigint import (
    # Representation constants
    LIMB_BASE,
    LIMB_DIGITS,
    # Well-known values
    ONE,
    TWO,
    ZERO,
    # Types
    DecimalBigInt,
    # Functions
    add,
    divide,
    modulo,
    multiply,
    subtract,
)

# Modular exponentiation
from src.core.math.modular_exponentiation import (
    ModularExponentiator,
    mod_exponent,
)

__all__ = [
    # DecimalBigInt — Constants
    "LIMB_BASE",
    "LIMB_DIGITS",
    "ONE",
    "TWO",
    "ZERO",
    # DecimalBigInt — Types
    "DecimalBigInt",
    # DecimalBigInt — Functions
    "add",
    "divide",
    "modulo",
    "multiply",
    "subtract",
    # Modular exponentiation
    "ModularExponentiator",
    "mod_exponent",
]

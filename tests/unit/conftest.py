"""
Общие фикстуры: RSA ключи для тестов протокола.

Реальный ключ выводится на лету обычными Python int (генерация ключей не
входит в библиотеку): модуль больше 10^153, поэтому половина кадра
(51 символ × 3 разряда) расшифровывается без потерь.
"""

import pytest

from src.core.domain.rsa_keys import RSAKeyConfig, RSAKeyMaterial

PUBLIC_EXPONENT = 65537

# Классический учебный ключ: n = 61 * 53
TOY_MODULUS = 3233
TOY_PUBLIC_EXPONENT = 17
TOY_PRIVATE_EXPONENT = 2753

_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


def _is_probable_prime(n: int) -> bool:
    if n < 2:
        return False
    for p in _WITNESSES:
        if n % p == 0:
            return n == p

    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1

    for a in _WITNESSES:
        x = pow(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


def _next_prime(start: int, e: int) -> int:
    candidate = start | 1
    while (candidate - 1) % e == 0 or not _is_probable_prime(candidate):
        candidate += 2
    return candidate


def build_key_numbers() -> tuple[int, int, int]:
    """(modulus, public_exponent, private_exponent) для ~155-разрядного модуля."""
    p = _next_prime(10**77 + 1, PUBLIC_EXPONENT)
    q = _next_prime(4 * 10**77 + 1, PUBLIC_EXPONENT)
    phi = (p - 1) * (q - 1)
    return p * q, PUBLIC_EXPONENT, pow(PUBLIC_EXPONENT, -1, phi)


@pytest.fixture(scope="session")
def rsa_key_numbers() -> tuple[int, int, int]:
    return build_key_numbers()


@pytest.fixture(scope="session")
def rsa_key_config(rsa_key_numbers) -> RSAKeyConfig:
    n, e, d = rsa_key_numbers
    return RSAKeyConfig(modulus=str(n), public_exponent=str(e), private_exponent=str(d))


@pytest.fixture(scope="session")
def rsa_keys(rsa_key_config) -> RSAKeyMaterial:
    return rsa_key_config.to_key_material()


@pytest.fixture(scope="session")
def toy_keys() -> RSAKeyMaterial:
    return RSAKeyConfig(
        modulus=str(TOY_MODULUS),
        public_exponent=str(TOY_PUBLIC_EXPONENT),
        private_exponent=str(TOY_PRIVATE_EXPONENT),
    ).to_key_material()

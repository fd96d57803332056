"""
Modular Exponentiation — square-and-multiply над DecimalBigInt

Модуль вычисляет base^exponent mod modulus методом square-and-multiply.
Двоичное разложение показателя получается повторным делением на 2
(DecimalBigInt), а чётность берётся по младшей десятичной цифре.

В каждом раунде шаг "умножить результат" (только при нечётном показателе)
и шаг "возвести основание в квадрат" независимы и выполняются параллельно;
следующий раунд ждёт оба шага (барьер).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Показатель строго убывает → O(log(exponent)) раундов
2. Результат пишет только координирующий поток (single writer)
3. modulus == 0 → DivisionByZero до начала вычислений
4. exponent == 0 → 1 mod modulus (совпадает с перебором)
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Final, Optional

from src.core.errors import DivisionByZero
from src.core.math.decimal_bigint import ONE, TWO, DecimalBigInt

logger = logging.getLogger(__name__)

# Шаг "умножение" и шаг "квадрат" одного раунда
ROUND_WORKERS: Final[int] = 2


def _multiply_mod(a: DecimalBigInt, b: DecimalBigInt, modulus: DecimalBigInt) -> DecimalBigInt:
    return (a * b) % modulus


class ModularExponentiator:
    """
    Square-and-multiply с параллельными шагами внутри раунда.

    Args:
        parallel: Если False, шаги раунда выполняются последовательно
            (результат идентичен)
    """

    def __init__(self, parallel: bool = True):
        self.parallel = parallel

    def mod_exponent(
        self,
        base: DecimalBigInt,
        exponent: DecimalBigInt,
        modulus: DecimalBigInt,
    ) -> DecimalBigInt:
        """
        Вычисление base^exponent mod modulus.

        Args:
            base: Основание
            exponent: Показатель (>= 0)
            modulus: Модуль (> 0)

        Returns:
            Результат в диапазоне [0, modulus)

        Raises:
            DivisionByZero: если modulus == 0

        Examples:
            >>> str(ModularExponentiator().mod_exponent(
            ...     DecimalBigInt("4"), DecimalBigInt("13"), DecimalBigInt("497")))
            '445'
        """
        if modulus.is_zero:
            raise DivisionByZero("Modular exponentiation with zero modulus")

        if not self.parallel:
            return self._run_rounds(base, exponent, modulus, executor=None)

        with ThreadPoolExecutor(max_workers=ROUND_WORKERS, thread_name_prefix="modexp") as executor:
            return self._run_rounds(base, exponent, modulus, executor=executor)

    def _run_rounds(
        self,
        base: DecimalBigInt,
        exponent: DecimalBigInt,
        modulus: DecimalBigInt,
        executor: Optional[ThreadPoolExecutor],
    ) -> DecimalBigInt:
        result = ONE % modulus
        current_base = base % modulus
        current_exponent = exponent
        rounds = 0

        while not current_exponent.is_zero:
            if executor is None:
                if current_exponent.is_odd:
                    result = _multiply_mod(result, current_base, modulus)
                current_base = _multiply_mod(current_base, current_base, modulus)
            else:
                multiply_future = None
                if current_exponent.is_odd:
                    multiply_future = executor.submit(_multiply_mod, result, current_base, modulus)
                square_future = executor.submit(_multiply_mod, current_base, current_base, modulus)

                # Барьер: оба шага раунда должны завершиться
                if multiply_future is not None:
                    result = multiply_future.result()
                current_base = square_future.result()

            current_exponent = current_exponent // TWO
            rounds += 1

        logger.debug("mod_exponent finished: %d rounds, modulus has %d digits", rounds, modulus.digit_count)
        return result


def mod_exponent(
    base: DecimalBigInt,
    exponent: DecimalBigInt,
    modulus: DecimalBigInt,
    parallel: bool = True,
) -> DecimalBigInt:
    """Сокращение для ModularExponentiator(parallel).mod_exponent(...)."""
    return ModularExponentiator(parallel=parallel).mod_exponent(base, exponent, modulus)

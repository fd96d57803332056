"""
DecimalBigInt — неотрицательные целые произвольной точности

Модуль реализует беззнаковую арифметику над десятичными числами:
- Сравнение (сначала по длине, затем лексикографически)
- Сложение и вычитание с переносом/заёмом от младших разрядов
- Умножение "в столбик"
- Деление и остаток "уголком" от старших разрядов

Внешний контракт — строка десятичных цифр без ведущих нулей ("0" для нуля).
Внутри значение хранится limbs по основанию 10^9 (little-endian), поэтому
каждый limb — ровно 9 десятичных разрядов. Все наблюдаемые строки и
результаты совпадают с поразрядным алгоритмом.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нет ведущих нулей, кроме представления нуля
2. Значения immutable: каждая операция создаёт новый объект
3. Деление на ноль → DivisionByZero (никогда не зацикливается)
4. a - b при a < b → NegativeDifference (никогда не возвращает мусор)
"""

from typing import Final

from src.core.errors import DivisionByZero, InvalidDigitInput, NegativeDifference

# =============================================================================
# КОНСТАНТЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Количество десятичных разрядов в одном limb
LIMB_DIGITS: Final[int] = 9

# Основание limb: 10^LIMB_DIGITS
LIMB_BASE: Final[int] = 10**LIMB_DIGITS

_DIGIT_CHARS: Final[frozenset[str]] = frozenset("0123456789")


# =============================================================================
# LIMB ПРИМИТИВЫ
# =============================================================================


def _normalize(limbs: list[int]) -> tuple[int, ...]:
    """Удаление старших нулевых limbs (ноль остаётся как (0,))."""
    end = len(limbs)
    while end > 1 and limbs[end - 1] == 0:
        end -= 1
    return tuple(limbs[:end])


def _parse_limbs(text: str) -> tuple[int, ...]:
    stripped = text.lstrip("0") or "0"
    limbs = []
    for end in range(len(stripped), 0, -LIMB_DIGITS):
        limbs.append(int(stripped[max(0, end - LIMB_DIGITS):end]))
    return tuple(limbs)


def _format_limbs(limbs: tuple[int, ...]) -> str:
    head = str(limbs[-1])
    tail = "".join(f"{limb:0{LIMB_DIGITS}d}" for limb in reversed(limbs[:-1]))
    return head + tail


def _compare(a: tuple[int, ...], b: tuple[int, ...]) -> int:
    """
    Сравнение нормализованных limbs.

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1
    return 0


def _add(a: tuple[int, ...], b: tuple[int, ...]) -> tuple[int, ...]:
    if len(a) < len(b):
        a, b = b, a
    result = []
    carry = 0
    for i in range(len(a)):
        total = a[i] + (b[i] if i < len(b) else 0) + carry
        if total >= LIMB_BASE:
            result.append(total - LIMB_BASE)
            carry = 1
        else:
            result.append(total)
            carry = 0
    if carry:
        result.append(carry)
    return _normalize(result)


def _sub(a: tuple[int, ...], b: tuple[int, ...]) -> tuple[int, ...]:
    """Вычитание при условии a >= b (проверяется вызывающим кодом)."""
    result = []
    borrow = 0
    for i in range(len(a)):
        diff = a[i] - (b[i] if i < len(b) else 0) - borrow
        if diff < 0:
            result.append(diff + LIMB_BASE)
            borrow = 1
        else:
            result.append(diff)
            borrow = 0
    return _normalize(result)


def _mul(a: tuple[int, ...], b: tuple[int, ...]) -> tuple[int, ...]:
    # Длина результата не превышает len(a) + len(b)
    product = [0] * (len(a) + len(b))
    for i, a_limb in enumerate(a):
        if a_limb == 0:
            continue
        carry = 0
        for j, b_limb in enumerate(b):
            current = product[i + j] + a_limb * b_limb + carry
            carry, product[i + j] = divmod(current, LIMB_BASE)
        product[i + len(b)] = carry
    return _normalize(product)


def _mul_small(a: tuple[int, ...], factor: int) -> tuple[int, ...]:
    """Умножение на один limb (0 <= factor < LIMB_BASE)."""
    if factor == 0:
        return (0,)
    result = []
    carry = 0
    for limb in a:
        carry, low = divmod(limb * factor + carry, LIMB_BASE)
        result.append(low)
    if carry:
        result.append(carry)
    return _normalize(result)


def _divmod_small(a: tuple[int, ...], divisor: int) -> tuple[tuple[int, ...], tuple[int, ...]]:
    quotient = [0] * len(a)
    remainder = 0
    for i in range(len(a) - 1, -1, -1):
        quotient[i], remainder = divmod(remainder * LIMB_BASE + a[i], divisor)
    return _normalize(quotient), (remainder,)


def _divmod(a: tuple[int, ...], b: tuple[int, ...]) -> tuple[tuple[int, ...], tuple[int, ...]]:
    """
    Деление "уголком" от старших limbs.

    На каждом шаге к остатку дописывается очередной limb делимого, после чего
    цифра частного оценивается по двум старшим limbs делителя и уточняется
    вычитанием. Остаток всегда < делителя * LIMB_BASE, поэтому оценка
    превышает истинную цифру не более чем на пару единиц.
    """
    if _compare(a, b) < 0:
        return (0,), a
    if len(b) == 1:
        return _divmod_small(a, b[0])

    n = len(b)
    divisor_top = b[n - 1] * LIMB_BASE + b[n - 2]
    quotient = [0] * len(a)
    remainder: tuple[int, ...] = (0,)

    for i in range(len(a) - 1, -1, -1):
        remainder = _normalize([a[i], *remainder])
        if _compare(remainder, b) < 0:
            continue

        high = remainder[n] if len(remainder) > n else 0
        remainder_top = (high * LIMB_BASE + remainder[n - 1]) * LIMB_BASE + remainder[n - 2]
        estimate = min((remainder_top + 1) // divisor_top, LIMB_BASE - 1)

        product = _mul_small(b, estimate)
        while _compare(product, remainder) > 0:
            estimate -= 1
            product = _sub(product, b)

        remainder = _sub(remainder, product)
        quotient[i] = estimate

    return _normalize(quotient), remainder


# =============================================================================
# DECIMAL BIGINT
# =============================================================================


class DecimalBigInt:
    """
    Неотрицательное целое произвольной точности.

    Создаётся из строки десятичных цифр; ведущие нули отбрасываются.

    Examples:
        >>> str(DecimalBigInt("000123"))
        '123'
        >>> str(DecimalBigInt("12") * DecimalBigInt("34"))
        '408'
        >>> DecimalBigInt("7") % DecimalBigInt("3") == DecimalBigInt("1")
        True
    """

    __slots__ = ("_limbs",)

    def __init__(self, digits: str):
        if not isinstance(digits, str):
            raise InvalidDigitInput(f"DecimalBigInt expects a digit string, got {type(digits).__name__}")
        if not digits:
            raise InvalidDigitInput("DecimalBigInt requires at least one digit")
        invalid = next((ch for ch in digits if ch not in _DIGIT_CHARS), None)
        if invalid is not None:
            raise InvalidDigitInput(f"Invalid digit {invalid!r} in {digits[:32]!r}")
        object.__setattr__(self, "_limbs", _parse_limbs(digits))

    @classmethod
    def _from_limbs(cls, limbs: tuple[int, ...]) -> "DecimalBigInt":
        value = object.__new__(cls)
        object.__setattr__(value, "_limbs", limbs)
        return value

    @classmethod
    def from_int(cls, value: int) -> "DecimalBigInt":
        """Построение из неотрицательного Python int."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidDigitInput(f"from_int expects int, got {type(value).__name__}")
        if value < 0:
            raise InvalidDigitInput(f"DecimalBigInt is non-negative, got {value}")
        return cls(str(value))

    def __setattr__(self, name, value):
        raise AttributeError("DecimalBigInt is immutable")

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    @property
    def digits(self) -> tuple[int, ...]:
        """Десятичные цифры, старший разряд первым."""
        return tuple(int(ch) for ch in str(self))

    @property
    def digit_count(self) -> int:
        return (len(self._limbs) - 1) * LIMB_DIGITS + len(str(self._limbs[-1]))

    @property
    def least_significant_digit(self) -> int:
        return self._limbs[0] % 10

    @property
    def is_zero(self) -> bool:
        return self._limbs == (0,)

    @property
    def is_odd(self) -> bool:
        return self.least_significant_digit % 2 == 1

    def __str__(self) -> str:
        return _format_limbs(self._limbs)

    def __repr__(self) -> str:
        return f"DecimalBigInt('{self}')"

    def __int__(self) -> int:
        return int(str(self))

    def __hash__(self) -> int:
        return hash(self._limbs)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DecimalBigInt):
            return NotImplemented
        return self._limbs == other._limbs

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, DecimalBigInt):
            return NotImplemented
        return self._limbs != other._limbs

    def __lt__(self, other: "DecimalBigInt") -> bool:
        if not isinstance(other, DecimalBigInt):
            return NotImplemented
        return _compare(self._limbs, other._limbs) < 0

    def __le__(self, other: "DecimalBigInt") -> bool:
        if not isinstance(other, DecimalBigInt):
            return NotImplemented
        return _compare(self._limbs, other._limbs) <= 0

    def __gt__(self, other: "DecimalBigInt") -> bool:
        if not isinstance(other, DecimalBigInt):
            return NotImplemented
        return _compare(self._limbs, other._limbs) > 0

    def __ge__(self, other: "DecimalBigInt") -> bool:
        if not isinstance(other, DecimalBigInt):
            return NotImplemented
        return _compare(self._limbs, other._limbs) >= 0

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: "DecimalBigInt") -> "DecimalBigInt":
        if not isinstance(other, DecimalBigInt):
            return NotImplemented
        return DecimalBigInt._from_limbs(_add(self._limbs, other._limbs))

    def __sub__(self, other: "DecimalBigInt") -> "DecimalBigInt":
        if not isinstance(other, DecimalBigInt):
            return NotImplemented
        if _compare(self._limbs, other._limbs) < 0:
            raise NegativeDifference(f"Cannot subtract {other} from smaller value {self}")
        return DecimalBigInt._from_limbs(_sub(self._limbs, other._limbs))

    def __mul__(self, other: "DecimalBigInt") -> "DecimalBigInt":
        if not isinstance(other, DecimalBigInt):
            return NotImplemented
        return DecimalBigInt._from_limbs(_mul(self._limbs, other._limbs))

    def __divmod__(self, other: "DecimalBigInt") -> tuple["DecimalBigInt", "DecimalBigInt"]:
        if not isinstance(other, DecimalBigInt):
            return NotImplemented
        if other.is_zero:
            raise DivisionByZero(f"Division of {self} by zero")
        quotient, remainder = _divmod(self._limbs, other._limbs)
        return DecimalBigInt._from_limbs(quotient), DecimalBigInt._from_limbs(remainder)

    def __floordiv__(self, other: "DecimalBigInt") -> "DecimalBigInt":
        if not isinstance(other, DecimalBigInt):
            return NotImplemented
        return divmod(self, other)[0]

    def __mod__(self, other: "DecimalBigInt") -> "DecimalBigInt":
        if not isinstance(other, DecimalBigInt):
            return NotImplemented
        return divmod(self, other)[1]


ZERO: Final[DecimalBigInt] = DecimalBigInt("0")
ONE: Final[DecimalBigInt] = DecimalBigInt("1")
TWO: Final[DecimalBigInt] = DecimalBigInt("2")


# =============================================================================
# ФУНКЦИОНАЛЬНЫЙ API
# =============================================================================


def add(a: DecimalBigInt, b: DecimalBigInt) -> DecimalBigInt:
    return a + b


def subtract(a: DecimalBigInt, b: DecimalBigInt) -> DecimalBigInt:
    """
    Беззнаковая разность a - b.

    Raises:
        NegativeDifference: если a < b
    """
    return a - b


def multiply(a: DecimalBigInt, b: DecimalBigInt) -> DecimalBigInt:
    return a * b


def divide(a: DecimalBigInt, b: DecimalBigInt) -> DecimalBigInt:
    """
    Целочисленное частное a // b.

    Raises:
        DivisionByZero: если b == 0
    """
    return a // b


def modulo(a: DecimalBigInt, b: DecimalBigInt) -> DecimalBigInt:
    """
    Остаток a % b.

    Raises:
        DivisionByZero: если b == 0
    """
    return a % b

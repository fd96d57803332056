"""
Text Codec — текст <-> DecimalBigInt

Каждый символ кодируется своим code point, дополненным нулями ровно до
3 десятичных разрядов; коды конкатенируются и читаются как одно число.

    "AB" -> "065" + "066" -> DecimalBigInt("65066")

Декодирование восстанавливает ведущие нули (до кратности 3) перед
разбиением на группы: число, пришедшее из модульного возведения в степень,
не помнит ведущих нулей первой группы.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Code point > 999 → CodecRangeError (никакого молчаливого усечения)
2. decode(encode(s)) == s для s без ведущих NUL символов
"""

from typing import Final, Optional

from src.core.errors import CodecRangeError, EmptyInput
from src.core.math.decimal_bigint import DecimalBigInt

# Разрядность кода одного символа
CODE_WIDTH: Final[int] = 3

# Максимальный code point, помещающийся в CODE_WIDTH разрядов
MAX_CODE_POINT: Final[int] = 10**CODE_WIDTH - 1


def encode(text: str) -> DecimalBigInt:
    """
    Кодирование текста в DecimalBigInt.

    Args:
        text: Непустая строка, все code points <= 999

    Returns:
        DecimalBigInt из конкатенации 3-значных кодов

    Raises:
        EmptyInput: если text пустой
        CodecRangeError: если code point символа > 999

    Examples:
        >>> str(encode("AB"))
        '65066'
    """
    if not text:
        raise EmptyInput("Nothing to encode")

    groups = []
    for position, ch in enumerate(text):
        code_point = ord(ch)
        if code_point > MAX_CODE_POINT:
            raise CodecRangeError(
                f"Character {ch!r} at position {position} has code point {code_point} "
                f"> {MAX_CODE_POINT}"
            )
        groups.append(f"{code_point:0{CODE_WIDTH}d}")

    return DecimalBigInt("".join(groups))


def decode(value: DecimalBigInt, width: Optional[int] = None) -> str:
    """
    Декодирование DecimalBigInt обратно в текст.

    Args:
        value: Закодированное значение
        width: Ожидаемое число символов (optional). Если задано, недостающие
            старшие группы восстанавливаются как NUL символы

    Returns:
        Декодированная строка

    Raises:
        CodecRangeError: если групп больше, чем width

    Examples:
        >>> decode(DecimalBigInt("65066"))
        'AB'
    """
    digits = str(value)

    # Ведущие нули первой группы теряются в числовом представлении
    remainder = len(digits) % CODE_WIDTH
    if remainder:
        digits = "0" * (CODE_WIDTH - remainder) + digits

    if width is not None:
        expected = width * CODE_WIDTH
        if len(digits) > expected:
            raise CodecRangeError(
                f"Value encodes {len(digits) // CODE_WIDTH} characters, expected at most {width}"
            )
        digits = digits.rjust(expected, "0")

    return "".join(
        chr(int(digits[i:i + CODE_WIDTH])) for i in range(0, len(digits), CODE_WIDTH)
    )

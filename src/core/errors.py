"""
Errors — таксономия ошибок decimal-rsa

Все ошибки ядра наследуются от DecimalRSAError и несут ErrorCode.
Внешний вызывающий код (CLI и т.п.) получает структурированный
ProtocolFailure через to_failure() и сам решает, как его показать.

Каждый класс дополнительно наследует подходящее встроенное исключение
(ValueError, ZeroDivisionError, ArithmeticError), поэтому обычный
`except ValueError` продолжает работать.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ошибки фиксируются на границе входа данных (конструктор, парсинг)
2. Никакого молчаливого усечения или бесконечных циклов
3. Ядро не печатает сообщений и не определяет exit codes
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


# =============================================================================
# ERROR CODES
# =============================================================================


class ErrorCode(str, Enum):
    """Машиночитаемый тег ошибки"""

    INVALID_DIGIT_INPUT = "INVALID_DIGIT_INPUT"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"
    NEGATIVE_DIFFERENCE = "NEGATIVE_DIFFERENCE"
    MALFORMED_CIPHERTEXT_PAIR = "MALFORMED_CIPHERTEXT_PAIR"
    CODEC_RANGE_ERROR = "CODEC_RANGE_ERROR"
    EMPTY_INPUT = "EMPTY_INPUT"
    INVALID_KEY_CONFIG = "INVALID_KEY_CONFIG"
    UNCLASSIFIED = "UNCLASSIFIED"


@dataclass(frozen=True)
class ProtocolFailure:
    """Структурированная ошибка для внешнего слоя."""

    code: ErrorCode
    message: str
    line_number: Optional[int] = None


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DecimalRSAError(Exception):
    """
    Базовая ошибка decimal-rsa.

    Args:
        message: Человекочитаемое описание
        line_number: Номер строки входа (1-based), если ошибка привязана к строке
    """

    code: ErrorCode = ErrorCode.UNCLASSIFIED

    def __init__(self, message: str, line_number: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.line_number = line_number

    def to_failure(self) -> ProtocolFailure:
        return ProtocolFailure(code=self.code, message=self.message, line_number=self.line_number)


class InvalidDigitInput(DecimalRSAError, ValueError):
    """Нецифровой (или пустой) ввод при построении DecimalBigInt."""

    code = ErrorCode.INVALID_DIGIT_INPUT


class DivisionByZero(DecimalRSAError, ZeroDivisionError):
    """Делитель или модуль равен нулю."""

    code = ErrorCode.DIVISION_BY_ZERO


class NegativeDifference(DecimalRSAError, ArithmeticError):
    """Вычитание a - b при a < b: результат не представим беззнаково."""

    code = ErrorCode.NEGATIVE_DIFFERENCE


class MalformedCiphertextPair(DecimalRSAError, ValueError):
    """Непарная, пустая или нецифровая строка шифротекста."""

    code = ErrorCode.MALFORMED_CIPHERTEXT_PAIR


class CodecRangeError(DecimalRSAError, ValueError):
    """Код символа не помещается в 3 десятичных разряда."""

    code = ErrorCode.CODEC_RANGE_ERROR


class EmptyInput(DecimalRSAError, ValueError):
    """Нет текста для шифрования или пар для расшифровки."""

    code = ErrorCode.EMPTY_INPUT


class KeyConfigError(DecimalRSAError, ValueError):
    """Невалидная конфигурация RSA ключей."""

    code = ErrorCode.INVALID_KEY_CONFIG

"""
Line Protocol — построчное RSA шифрование текста

Шифрование строки:
1. Усечение до MAX_LINE_CHARS
2. Кадр: номер строки + содержимое с пробелами до 96 + номер строки
3. Деление кадра на две половины по HALF_WIDTH символов
4. encode каждой половины и mod_exponent(public_exponent, modulus)
   → пара десятичных строк (CiphertextPair)

Расшифровка — зеркально: mod_exponent(private_exponent, modulus),
decode, конкатенация половин, снятие кадра и хвостовых пробелов.

Строки независимы и обрабатываются ограниченным пулом потоков; результат
всегда возвращается в порядке входа. При первой ошибке ещё не начатые
задачи отменяются.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. encrypt("") → EmptyInput, decrypt([]) → EmptyInput
2. Одна CiphertextPair на одну входную строку (1:1)
3. Нечётное число строк шифротекста → MalformedCiphertextPair
4. Ключи передаются явно (RSAKeyMaterial), глобального состояния нет
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Any, Callable, Generic, NamedTuple, Optional, Sequence, TypeVar

from src.codec.text_codec import CODE_WIDTH, decode, encode
from src.core.domain.rsa_keys import RSAKeyMaterial
from src.core.errors import (
    CodecRangeError,
    DecimalRSAError,
    EmptyInput,
    InvalidDigitInput,
    MalformedCiphertextPair,
    ProtocolFailure,
)
from src.core.math.decimal_bigint import DecimalBigInt
from src.core.math.modular_exponentiation import ModularExponentiator
from src.protocol.framing import HALF_WIDTH, frame_line, split_frame, split_text_lines, unframe

logger = logging.getLogger(__name__)

T = TypeVar("T")


# =============================================================================
# ТИПЫ
# =============================================================================


class CiphertextPair(NamedTuple):
    """Шифротекст одной строки: две десятичные строки."""

    first: str
    second: str


class DecryptedLine(NamedTuple):
    """Расшифрованная строка и номер из её маркера (None, если маркер не числовой)."""

    line_number: Optional[int]
    text: str


@dataclass(frozen=True)
class ProtocolResult(Generic[T]):
    """Результат encrypt/decrypt без исключений."""

    ok: bool
    value: Optional[T] = None
    failure: Optional[ProtocolFailure] = None


# =============================================================================
# WIRE FORMAT
# =============================================================================


def pair_ciphertext_lines(lines: Sequence[str]) -> list[CiphertextPair]:
    """
    Группировка строк шифротекста попарно.

    Raises:
        MalformedCiphertextPair: если строк нечётное число
    """
    if len(lines) % 2 != 0:
        raise MalformedCiphertextPair(
            f"Ciphertext has odd number of lines ({len(lines)}): last block is unpaired",
            line_number=len(lines),
        )
    return [CiphertextPair(lines[i], lines[i + 1]) for i in range(0, len(lines), 2)]


def format_ciphertext_lines(pairs: Sequence[tuple[str, str]]) -> list[str]:
    """Обратное к pair_ciphertext_lines: каждая пара → две строки."""
    return [half for pair in pairs for half in pair]


def _parse_half(half: Any, index: int) -> DecimalBigInt:
    if not isinstance(half, str) or not half:
        raise MalformedCiphertextPair(
            f"Ciphertext block must be a non-empty digit string, got {half!r}",
            line_number=index,
        )
    try:
        return DecimalBigInt(half)
    except InvalidDigitInput as e:
        raise MalformedCiphertextPair(f"Ciphertext block is not numeric: {e}", line_number=index) from e


# =============================================================================
# LINE PROTOCOL
# =============================================================================


class LineProtocol:
    """
    Построчное шифрование/расшифровка.

    Args:
        keys: Ключевой материал (модуль, экспоненты)
        exponentiator: Реализация mod_exponent (default: ModularExponentiator())
        max_workers: Размер пула потоков для строк (default: как у ThreadPoolExecutor)
    """

    def __init__(
        self,
        keys: RSAKeyMaterial,
        exponentiator: Optional[ModularExponentiator] = None,
        max_workers: Optional[int] = None,
    ):
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be positive, got {max_workers}")

        self.keys = keys
        self.exponentiator = exponentiator or ModularExponentiator()
        self.max_workers = max_workers

        # Половина кадра кодируется в HALF_WIDTH * CODE_WIDTH разрядов
        if keys.modulus.digit_count <= HALF_WIDTH * CODE_WIDTH:
            logger.warning(
                "RSA modulus has %d digits; half-blocks need more than %d digits "
                "to decrypt losslessly",
                keys.modulus.digit_count,
                HALF_WIDTH * CODE_WIDTH,
            )

    # -------------------------------------------------------------------------
    # Шифрование
    # -------------------------------------------------------------------------

    def encrypt_line(self, line: str, line_number: int) -> CiphertextPair:
        """
        Шифрование одной строки.

        Args:
            line: Содержимое строки (без '\\n')
            line_number: Номер строки (1-based)

        Raises:
            CodecRangeError: если в строке символ с code point > 999
        """
        first_half, second_half = split_frame(frame_line(line, line_number))
        try:
            first = self._apply(encode(first_half), self.keys.public_exponent)
            second = self._apply(encode(second_half), self.keys.public_exponent)
        except DecimalRSAError as e:
            if e.line_number is None:
                e.line_number = line_number
            raise
        return CiphertextPair(str(first), str(second))

    def encrypt(self, text: str) -> list[CiphertextPair]:
        """
        Шифрование текста построчно.

        Returns:
            Список CiphertextPair в порядке строк

        Raises:
            EmptyInput: если text пустой
            CodecRangeError: если символ вне диапазона кодека
        """
        if not text:
            raise EmptyInput("No text to encrypt")

        lines = split_text_lines(text)
        logger.debug("Encrypting %d lines", len(lines))
        return self._run_ordered(self.encrypt_line, [(line, i) for i, line in enumerate(lines, start=1)])

    def try_encrypt(self, text: str) -> ProtocolResult[list[CiphertextPair]]:
        try:
            return ProtocolResult(ok=True, value=self.encrypt(text))
        except DecimalRSAError as e:
            return ProtocolResult(ok=False, failure=e.to_failure())

    # -------------------------------------------------------------------------
    # Расшифровка
    # -------------------------------------------------------------------------

    def decrypt_pair(self, pair: Sequence[str], index: int = 1) -> DecryptedLine:
        """
        Расшифровка одной пары; половины обрабатываются параллельно.

        Args:
            pair: (first, second) десятичные строки
            index: Позиция пары во входе (1-based, для сообщений об ошибках)

        Raises:
            MalformedCiphertextPair: если пара неполная, нечисловая,
                не меньше модуля или расшифровывается не в кадр
        """
        first, second = self._parse_pair(pair, index)
        return self._decrypt_blocks(first, second, index)

    def decrypt_lines(self, pairs: Sequence[Sequence[str]]) -> list[DecryptedLine]:
        """
        Расшифровка пар с сохранением номеров строк из маркеров.

        Raises:
            EmptyInput: если pairs пустой
            MalformedCiphertextPair: если какая-либо пара невалидна
        """
        if not pairs:
            raise EmptyInput("No values to decrypt")

        # Проверка формы всех пар до запуска тяжёлых вычислений
        blocks = [
            (*self._parse_pair(pair, index), index) for index, pair in enumerate(pairs, start=1)
        ]

        logger.debug("Decrypting %d ciphertext pairs", len(pairs))
        return self._run_ordered(self._decrypt_blocks, blocks)

    def decrypt(self, pairs: Sequence[Sequence[str]]) -> list[str]:
        """
        Расшифровка пар в строки текста.

        Returns:
            Строки в порядке пар (без хвостовых пробелов)
        """
        return [line.text for line in self.decrypt_lines(pairs)]

    def try_decrypt(self, pairs: Sequence[Sequence[str]]) -> ProtocolResult[list[str]]:
        try:
            return ProtocolResult(ok=True, value=self.decrypt(pairs))
        except DecimalRSAError as e:
            return ProtocolResult(ok=False, failure=e.to_failure())

    # -------------------------------------------------------------------------
    # Внутреннее
    # -------------------------------------------------------------------------

    def _apply(self, value: DecimalBigInt, exponent: DecimalBigInt) -> DecimalBigInt:
        return self.exponentiator.mod_exponent(value, exponent, self.keys.modulus)

    def _decrypt_blocks(self, first: DecimalBigInt, second: DecimalBigInt, index: int) -> DecryptedLine:
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="half") as executor:
            first_future = executor.submit(self._apply, first, self.keys.private_exponent)
            second_future = executor.submit(self._apply, second, self.keys.private_exponent)
            first_plain = first_future.result()
            second_plain = second_future.result()

        try:
            frame = decode(first_plain, width=HALF_WIDTH) + decode(second_plain, width=HALF_WIDTH)
        except CodecRangeError as e:
            raise MalformedCiphertextPair(
                f"Ciphertext pair does not decrypt to a frame: {e}", line_number=index
            ) from e

        line_number, content = unframe(frame)
        return DecryptedLine(line_number, content)

    def _parse_pair(self, pair: Sequence[str], index: int) -> tuple[DecimalBigInt, DecimalBigInt]:
        if not isinstance(pair, (tuple, list)) or len(pair) != 2:
            raise MalformedCiphertextPair(
                f"Ciphertext pair must have exactly 2 blocks, got {pair!r}", line_number=index
            )

        halves = (_parse_half(pair[0], index), _parse_half(pair[1], index))
        for half in halves:
            if half >= self.keys.modulus:
                raise MalformedCiphertextPair(
                    "Ciphertext block is not smaller than the modulus", line_number=index
                )
        return halves

    def _run_ordered(self, task: Callable[..., T], arguments: list[tuple]) -> list[T]:
        """
        Выполнение задач в пуле с сохранением порядка результатов.

        При первой ошибке не начатые задачи отменяются, ошибка пробрасывается.
        """
        results: list[Any] = [None] * len(arguments)

        with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="line") as executor:
            future_to_index = {
                executor.submit(task, *args): index for index, args in enumerate(arguments)
            }
            try:
                for future in as_completed(future_to_index):
                    results[future_to_index[future]] = future.result()
            except Exception:
                executor.shutdown(wait=False, cancel_futures=True)
                logger.debug("Task failed, cancelled pending tasks")
                raise

        return results

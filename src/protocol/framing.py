"""
Framing — кадрирование строк открытого текста

Каждая строка превращается в кадр фиксированной ширины:

    [NNN][содержимое, дополненное пробелами до 96][NNN]   (102 символа)

где NNN — номер строки (3 цифры, с ведущими нулями). Кадр делится на две
половины по 51 символу, каждая шифруется отдельно.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. len(frame_line(...)) == FRAME_WIDTH для любой строки
2. Строка длиннее MAX_LINE_CHARS усекается до кадрирования
3. unframe снимает ровно LINE_NUMBER_WIDTH символов с каждого края
   и хвостовые пробелы
"""

from typing import Final, Optional

from src.core.errors import MalformedCiphertextPair

# =============================================================================
# КОНСТАНТЫ ПРОТОКОЛА
# =============================================================================

# Ширина поля номера строки
LINE_NUMBER_WIDTH: Final[int] = 3

# Номера строк в поле из 3 цифр циклически повторяются
LINE_NUMBER_MODULUS: Final[int] = 10**LINE_NUMBER_WIDTH

# Максимальная длина содержимого строки
MAX_LINE_CHARS: Final[int] = 96

# Полная ширина кадра: маркер + содержимое + маркер
FRAME_WIDTH: Final[int] = LINE_NUMBER_WIDTH + MAX_LINE_CHARS + LINE_NUMBER_WIDTH

# Ширина половины кадра (half-block)
HALF_WIDTH: Final[int] = FRAME_WIDTH // 2

PADDING_CHAR: Final[str] = " "


def split_text_lines(text: str) -> list[str]:
    """
    Разбиение текста на строки по '\\n'.

    Завершающий перевод строки не порождает лишней пустой строки.

    Examples:
        >>> split_text_lines("a\\n\\nb\\n")
        ['a', '', 'b']
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def truncate_line(line: str) -> str:
    return line[:MAX_LINE_CHARS]


def format_line_number(line_number: int) -> str:
    """
    Номер строки как 3 цифры.

    Examples:
        >>> format_line_number(7)
        '007'
        >>> format_line_number(1001)
        '001'
    """
    return f"{line_number % LINE_NUMBER_MODULUS:0{LINE_NUMBER_WIDTH}d}"


def frame_line(line: str, line_number: int) -> str:
    """
    Кадрирование строки.

    Args:
        line: Содержимое строки (усекается до MAX_LINE_CHARS)
        line_number: Номер строки (1-based)

    Returns:
        Кадр ровно FRAME_WIDTH символов
    """
    marker = format_line_number(line_number)
    return marker + truncate_line(line).ljust(MAX_LINE_CHARS, PADDING_CHAR) + marker


def split_frame(frame: str) -> tuple[str, str]:
    """
    Деление кадра на половины [0, 51) и [51, 102).

    Принимает только результат frame_line. ValueError здесь означает
    ошибку программирования, а не невалидный ввод пользователя, поэтому
    в таксономию DecimalRSAError не входит.
    """
    if len(frame) != FRAME_WIDTH:
        raise ValueError(f"Frame must be {FRAME_WIDTH} characters, got {len(frame)}")
    return frame[:HALF_WIDTH], frame[HALF_WIDTH:]


def unframe(frame: str) -> tuple[Optional[int], str]:
    """
    Снятие кадра.

    Returns:
        (line_number, content): line_number — None, если маркер не числовой

    Raises:
        MalformedCiphertextPair: если кадр короче двух маркеров
    """
    if len(frame) < 2 * LINE_NUMBER_WIDTH:
        raise MalformedCiphertextPair(
            f"Decrypted frame too short: {len(frame)} characters"
        )

    marker = frame[:LINE_NUMBER_WIDTH]
    content = frame[LINE_NUMBER_WIDTH:-LINE_NUMBER_WIDTH].rstrip(PADDING_CHAR)

    line_number = int(marker) if marker.isascii() and marker.isdigit() else None
    return line_number, content

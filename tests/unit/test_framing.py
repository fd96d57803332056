"""
Тесты для Framing — кадрирование строк

Проверяет:
1. Ширину кадра и положение маркеров
2. Усечение до 96 символов (граница 96/97)
3. Деление на половины по 51 символу
4. Снятие кадра и хвостовых пробелов
5. Разбиение текста на строки
"""

import pytest

from src.core.errors import DecimalRSAError, MalformedCiphertextPair
from src.protocol.framing import (
    FRAME_WIDTH,
    HALF_WIDTH,
    LINE_NUMBER_WIDTH,
    MAX_LINE_CHARS,
    format_line_number,
    frame_line,
    split_frame,
    split_text_lines,
    truncate_line,
    unframe,
)


class TestConstants:
    def test_protocol_widths(self) -> None:
        assert MAX_LINE_CHARS == 96
        assert FRAME_WIDTH == 102
        assert HALF_WIDTH == 51
        assert LINE_NUMBER_WIDTH == 3


class TestFrameLine:
    """Тесты frame_line"""

    def test_single_character_frame(self) -> None:
        assert frame_line("A", 1) == "001A" + " " * 95 + "001"

    def test_empty_line(self) -> None:
        assert frame_line("", 12) == "012" + " " * 96 + "012"

    @pytest.mark.parametrize("length", [0, 1, 50, 95, 96, 97, 200])
    def test_frame_width_constant(self, length: int) -> None:
        assert len(frame_line("x" * length, 5)) == FRAME_WIDTH

    def test_96_chars_not_truncated(self) -> None:
        line = "a" * 96
        assert frame_line(line, 1) == "001" + line + "001"

    def test_97_chars_truncated(self) -> None:
        line = "a" * 96 + "Z"
        assert frame_line(line, 1) == "001" + "a" * 96 + "001"
        assert truncate_line(line) == "a" * 96

    def test_line_number_wraps(self) -> None:
        assert format_line_number(999) == "999"
        assert format_line_number(1000) == "000"
        assert frame_line("x", 1001).startswith("001x")


class TestSplitFrame:
    """Тесты split_frame"""

    def test_halves(self) -> None:
        frame = frame_line("A", 1)
        first, second = split_frame(frame)
        assert first == "001A" + " " * 47
        assert second == " " * 48 + "001"
        assert len(first) == len(second) == HALF_WIDTH

    def test_wrong_width_rejected(self) -> None:
        with pytest.raises(ValueError) as exc_info:
            split_frame("short")
        # Ошибка программирования, не пользовательская ошибка протокола
        assert not isinstance(exc_info.value, DecimalRSAError)


class TestUnframe:
    """Тесты unframe"""

    def test_strips_markers_and_padding(self) -> None:
        assert unframe(frame_line("hello world", 42)) == (42, "hello world")

    def test_keeps_inner_spaces(self) -> None:
        assert unframe(frame_line("  indented  text", 3)) == (3, "  indented  text")

    def test_trailing_spaces_are_lost(self) -> None:
        """Хвостовые пробелы неотличимы от дополнения"""
        assert unframe(frame_line("trailing   ", 1)) == (1, "trailing")

    def test_non_numeric_marker(self) -> None:
        assert unframe("abcCONTENTxyz") == (None, "CONTENT")

    def test_too_short(self) -> None:
        with pytest.raises(MalformedCiphertextPair):
            unframe("12345")


class TestSplitTextLines:
    """Тесты split_text_lines"""

    def test_trailing_newline_ignored(self) -> None:
        assert split_text_lines("a\nb\n") == ["a", "b"]

    def test_blank_lines_kept(self) -> None:
        assert split_text_lines("a\n\nb") == ["a", "", "b"]

    def test_single_newline_is_one_empty_line(self) -> None:
        assert split_text_lines("\n") == [""]

    def test_no_newline(self) -> None:
        assert split_text_lines("only") == ["only"]

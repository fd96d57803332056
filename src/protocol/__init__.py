"""
Line protocol — кадрирование строк и построчное RSA шифрование.
"""

from .framing import (
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
from .line_protocol import (
    CiphertextPair,
    DecryptedLine,
    LineProtocol,
    ProtocolResult,
    format_ciphertext_lines,
    pair_ciphertext_lines,
)

__all__ = [
    # Framing constants
    "FRAME_WIDTH",
    "HALF_WIDTH",
    "LINE_NUMBER_WIDTH",
    "MAX_LINE_CHARS",
    # Framing functions
    "format_line_number",
    "frame_line",
    "split_frame",
    "split_text_lines",
    "truncate_line",
    "unframe",
    # Protocol
    "CiphertextPair",
    "DecryptedLine",
    "LineProtocol",
    "ProtocolResult",
    "format_ciphertext_lines",
    "pair_ciphertext_lines",
]

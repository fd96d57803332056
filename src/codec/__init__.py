"""
Text codec — преобразование текста в DecimalBigInt и обратно.
"""

from .text_codec import CODE_WIDTH, MAX_CODE_POINT, decode, encode

__all__ = [
    "CODE_WIDTH",
    "MAX_CODE_POINT",
    "decode",
    "encode",
]

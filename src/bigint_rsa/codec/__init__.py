"""
Codec — преобразование текста в BigInteger и обратно.
"""

from .text_codec import decode_text, encode_text

__all__ = [
    "decode_text",
    "encode_text",
]

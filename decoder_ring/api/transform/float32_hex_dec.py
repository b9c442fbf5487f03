"""Hex words to binary32 values."""

import struct

from ._format_float32 import _format_float32
from ._parse_hex_word import _parse_hex_word
from ._split_words import _split_words


def float32_hex_dec(src: bytes) -> bytes:
    """Reinterpret each 32-bit hex word as a binary32 value.

    Each value is followed by a single space, including the last one.
    """
    out = []
    for word in _split_words(src):
        bits = _parse_hex_word(word, 32)
        (value,) = struct.unpack(">f", bits.to_bytes(4, "big"))
        out.append(f"{_format_float32(value)} ")
    return "".join(out).encode("ascii")

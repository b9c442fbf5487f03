"""Hex words to binary16 values."""

import struct

from ._format_float32 import _format_float32
from ._parse_hex_word import _parse_hex_word
from ._split_words import _split_words


def float16_hex_dec(src: bytes) -> bytes:
    """Reinterpret each 16-bit hex word as a binary16 value.

    Values are widened to binary32 before formatting, so they print with the
    shortest digits that identify the binary32 value.
    """
    out = []
    for word in _split_words(src):
        bits = _parse_hex_word(word, 16)
        (value,) = struct.unpack(">e", bits.to_bytes(2, "big"))
        out.append(f"{_format_float32(value)} ")
    return "".join(out).encode("ascii")

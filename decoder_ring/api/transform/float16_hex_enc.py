"""Binary16 values to hex words."""

import math
import struct

from ._parse_float32 import _parse_float32
from ._split_words import _split_words


def _pack_half(value: float) -> bytes:
    """Round to nearest-even binary16; overflow saturates to a signed infinity."""
    try:
        return struct.pack(">e", value)
    except OverflowError:
        return struct.pack(">e", math.copysign(math.inf, value))


def float16_hex_enc(src: bytes) -> bytes:
    """Narrow each value to binary32, then binary16, and print 4 uppercase hex digits."""
    out = []
    for word in _split_words(src):
        (bits,) = struct.unpack(">H", _pack_half(_parse_float32(word)))
        out.append(f"{bits:04X} ")
    return "".join(out).encode("ascii")

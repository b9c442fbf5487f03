"""Binary32 values to hex words."""

import struct

from ._parse_float32 import _parse_float32
from ._split_words import _split_words


def float32_hex_enc(src: bytes) -> bytes:
    """Print the bit pattern of each value as 8 uppercase hex digits and a space."""
    out = []
    for word in _split_words(src):
        (bits,) = struct.unpack(">I", struct.pack(">f", _parse_float32(word)))
        out.append(f"{bits:08X} ")
    return "".join(out).encode("ascii")

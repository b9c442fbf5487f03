"""Parse one float literal and narrow it to binary32."""

import math
import re
import struct

from ._underscores_ok import _underscores_ok
from .TransformError import TransformError

_DECIMAL = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
_HEXADECIMAL = re.compile(r"[+-]?0[xX]([0-9A-Fa-f]+\.?[0-9A-Fa-f]*|\.[0-9A-Fa-f]+)[pP][+-]?[0-9]+")
# Infinities may be signed, NaN may not
_INFINITY = re.compile(r"[+-]?(inf|infinity)", re.IGNORECASE)
_NAN = re.compile(r"nan", re.IGNORECASE)


def _parse_float32(word: str) -> float:
    """Parse word and round it to the nearest binary32 value.

    Accepts decimal literals, hexadecimal literals with a binary exponent
    (``0x1.8p1``), inf/infinity with an optional sign, and unsigned nan, in
    any case. Underscores may separate digits (``1_000``, ``0x_1p0``).

    Raises:
        TransformError: If word is not a float literal or overflows binary32
    """
    special = _INFINITY.fullmatch(word) or _NAN.fullmatch(word)
    if not special and "_" in word:
        if not _underscores_ok(word):
            raise TransformError(f"parsing {word!r}: invalid float literal")
        word = word.replace("_", "")

    if special or _DECIMAL.fullmatch(word):
        value = float(word)
    elif _HEXADECIMAL.fullmatch(word):
        try:
            value = float.fromhex(word)
        except OverflowError as exc:
            raise TransformError(f"parsing {word!r}: value out of range for float32") from exc
    else:
        raise TransformError(f"parsing {word!r}: invalid float literal")

    if math.isinf(value) and not special:
        raise TransformError(f"parsing {word!r}: value out of range for float32")
    try:
        (narrowed,) = struct.unpack(">f", struct.pack(">f", value))
    except OverflowError as exc:
        raise TransformError(f"parsing {word!r}: value out of range for float32") from exc
    return narrowed

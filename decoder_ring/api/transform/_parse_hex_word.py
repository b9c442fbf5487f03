"""Parse one unsigned hex token of a fixed bit width."""

import re

from .TransformError import TransformError

_HEX_DIGITS = re.compile(r"[0-9A-Fa-f]+")


def _parse_hex_word(word: str, bit_size: int) -> int:
    """Parse word as bare hex digits (no prefix, sign or separators).

    Raises:
        TransformError: If word is not hex or does not fit in bit_size bits
    """
    if not _HEX_DIGITS.fullmatch(word):
        raise TransformError(f"parsing {word!r}: invalid hex word")
    value = int(word, 16)
    if value >> bit_size:
        raise TransformError(f"parsing {word!r}: value out of range for {bit_size}-bit word")
    return value

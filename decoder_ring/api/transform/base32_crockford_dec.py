"""Crockford base32 decoder."""

import base64
import binascii

from ._CROCKFORD import CONFUSABLES, CROCKFORD_ALPHABET, FROM_CROCKFORD
from ._strip_line_breaks import _strip_line_breaks
from .TransformError import TransformError


def base32_crockford_dec(src: bytes) -> bytes:
    """Decode Crockford base32.

    Input is normalized first: uppercased, I and L read as 1, O read as 0, and
    every '-' dropped wherever it appears. Padding rules match base32.

    Raises:
        TransformError: On a byte outside the alphabet or bad padding
    """
    normalized = _strip_line_breaks(src).upper().translate(CONFUSABLES).replace(b"-", b"")

    illegal = normalized.translate(None, CROCKFORD_ALPHABET + b"=")
    if illegal:
        raise TransformError(f"illegal base32-crockford data: unexpected byte {illegal[:1]!r}")

    try:
        return base64.b32decode(normalized.translate(FROM_CROCKFORD))
    except binascii.Error as exc:
        raise TransformError(f"illegal base32-crockford data: {exc}") from exc

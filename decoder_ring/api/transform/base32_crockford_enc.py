"""Crockford base32 encoder."""

import base64

from ._CROCKFORD import TO_CROCKFORD


def base32_crockford_enc(src: bytes) -> bytes:
    """Encode with the Crockford alphabet, padded, without separators."""
    return base64.b32encode(src).translate(TO_CROCKFORD)

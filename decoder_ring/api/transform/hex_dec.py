"""Hex decoder."""

import binascii

from .TransformError import TransformError


def hex_dec(src: bytes) -> bytes:
    """Decode hex digits of either case.

    Raises:
        TransformError: On odd length or a non-hex byte
    """
    try:
        return binascii.unhexlify(src)
    except binascii.Error as exc:
        raise TransformError(f"invalid hex input: {exc}") from exc

"""Lowercase hex encoder."""

import binascii


def hex_enc(src: bytes) -> bytes:
    return binascii.hexlify(src)

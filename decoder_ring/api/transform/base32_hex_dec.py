"""RFC 4648 base32 "extended hex" decoder."""

import base64
import binascii

from ._strip_line_breaks import _strip_line_breaks
from .TransformError import TransformError


def base32_hex_dec(src: bytes) -> bytes:
    try:
        return base64.b32hexdecode(_strip_line_breaks(src))
    except binascii.Error as exc:
        raise TransformError(f"illegal base32hex data: {exc}") from exc

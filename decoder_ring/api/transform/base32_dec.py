"""RFC 4648 base32 decoder."""

import base64
import binascii

from ._strip_line_breaks import _strip_line_breaks
from .TransformError import TransformError


def base32_dec(src: bytes) -> bytes:
    """Decode padded, uppercase base32. CR and LF are ignored."""
    try:
        return base64.b32decode(_strip_line_breaks(src))
    except binascii.Error as exc:
        raise TransformError(f"illegal base32 data: {exc}") from exc

"""RFC 4648 base64 decoder."""

import base64
import binascii

from ._strip_line_breaks import _strip_line_breaks
from .TransformError import TransformError


def base64_dec(src: bytes) -> bytes:
    """Decode padded standard base64. CR and LF are ignored."""
    try:
        return base64.b64decode(_strip_line_breaks(src), validate=True)
    except binascii.Error as exc:
        raise TransformError(f"illegal base64 data: {exc}") from exc

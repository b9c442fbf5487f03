"""RFC 4648 URL-safe base64 decoder."""

import base64
import binascii

from ._strip_line_breaks import _strip_line_breaks
from .TransformError import TransformError


def base64_url_dec(src: bytes) -> bytes:
    """Decode padded URL-safe base64.

    The standard alphabet's '+' and '/' are rejected rather than silently
    accepted alongside '-' and '_'.
    """
    data = _strip_line_breaks(src)
    for byte in (b"+", b"/"):
        if byte in data:
            raise TransformError(f"illegal base64-url data: unexpected byte {byte!r}")
    try:
        return base64.b64decode(data, altchars=b"-_", validate=True)
    except binascii.Error as exc:
        raise TransformError(f"illegal base64-url data: {exc}") from exc

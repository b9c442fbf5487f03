"""Reject malformed percent escapes."""

import re

from .TransformError import TransformError

_BAD_ESCAPE = re.compile(rb"%(?![0-9A-Fa-f]{2})")


def _check_percent_escapes(src: bytes) -> None:
    """Raise if any '%' is not followed by two hex digits."""
    match = _BAD_ESCAPE.search(src)
    if match:
        start = match.start()
        escape = src[start : start + 3].decode("utf-8", errors="replace")
        raise TransformError(f"invalid URL escape {escape!r}")

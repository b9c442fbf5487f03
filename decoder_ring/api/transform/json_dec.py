"""Decode a JSON string literal, quoted or bare."""

import json
import re

from ._wrap_bare_literal import _wrap_bare_literal
from .TransformError import TransformError

_INVALID_BYTES = re.compile("[\udc80-\udcff]")
_SURROGATES = re.compile("[\ud800-\udfff]")


def json_dec(src: bytes) -> bytes:
    """Parse src as a JSON string and return its UTF-8 value.

    Bare input (not starting with '"') is wrapped in quotes first. Invalid
    UTF-8 and lone surrogate escapes decode to U+FFFD.

    Raises:
        TransformError: If the text is not a single JSON string
    """
    document = _wrap_bare_literal(src, b'"')
    text = _INVALID_BYTES.sub("\ufffd", document.decode("utf-8", errors="surrogateescape"))
    try:
        value = json.loads(text)
    except json.JSONDecodeError as exc:
        raise TransformError(f"invalid JSON string: {exc}") from exc
    return _SURROGATES.sub("\ufffd", value).encode("utf-8")

"""Quote bytes as a JSON string literal."""

import json
import re

# HTML-sensitive characters, JS line terminators, and surrogateescape
# stand-ins for bytes that are not valid UTF-8
_EXTRA_ESCAPES = re.compile("[<>&\u2028\u2029\udc80-\udcff]")


def _escape(match: re.Match) -> str:
    code = ord(match.group())
    if 0xDC80 <= code <= 0xDCFF:
        return "\\ufffd"
    return f"\\u{code:04x}"


def json_enc(src: bytes) -> bytes:
    """Encode src as a JSON string, HTML-safe, with non-ASCII text kept raw."""
    text = src.decode("utf-8", errors="surrogateescape")
    quoted = json.dumps(text, ensure_ascii=False)
    return _EXTRA_ESCAPES.sub(_escape, quoted).encode("utf-8")

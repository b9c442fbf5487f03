"""Quote bytes as an ASCII-only Go string literal."""

_SHORT_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def _escape(ch: str) -> str:
    code = ord(ch)
    if ch in _SHORT_ESCAPES:
        return _SHORT_ESCAPES[ch]
    if 0x20 <= code < 0x7F:
        return ch
    if code < 0x20 or code == 0x7F:
        return f"\\x{code:02x}"
    if 0xDC80 <= code <= 0xDCFF:
        # surrogateescape stand-in for a byte that is not valid UTF-8
        return f"\\x{code - 0xDC00:02x}"
    if code < 0x10000:
        return f"\\u{code:04x}"
    return f"\\U{code:08x}"


def go_enc(src: bytes) -> bytes:
    """Produce a double-quoted literal that contains only printable ASCII.

    Non-ASCII code points become ``\\uNNNN`` or ``\\UNNNNNNNN``; control
    bytes, DEL and bytes that are not valid UTF-8 become ``\\xNN``.
    """
    text = src.decode("utf-8", errors="surrogateescape")
    return ('"' + "".join(_escape(ch) for ch in text) + '"').encode("ascii")

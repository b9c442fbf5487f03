"""Unquote a complete Go string, raw string or rune literal."""

from ._unquote_go_char import _syntax_error, _unquote_go_char

_DOUBLE, _SINGLE, _BACKTICK = 0x22, 0x27, 0x60


def _unquote_go_literal(literal: bytes) -> bytes:
    """Return the value of a literal delimited by ", ` or '.

    Raw (backtick) literals are taken verbatim with CR removed. Interpreted
    literals may not contain an unescaped newline, and a single-quoted literal
    holds at most one character. Any text after the closing delimiter is an
    error.

    Raises:
        TransformError: If the literal is malformed
    """
    if len(literal) < 2:
        raise _syntax_error()
    quote = literal[0]
    if quote not in (_DOUBLE, _SINGLE, _BACKTICK):
        raise _syntax_error()

    if quote == _BACKTICK:
        end = literal.find(b"`", 1)
        if end != len(literal) - 1:
            raise _syntax_error()
        return literal[1:end].replace(b"\r", b"")

    out = bytearray()
    i = 1
    while i < len(literal) and literal[i] != quote:
        if literal[i] == 0x0A:
            raise _syntax_error()
        value, multibyte, i = _unquote_go_char(literal, i, quote)
        if value < 0x80 or not multibyte:
            out.append(value)
        else:
            out.extend(chr(value).encode("utf-8"))
        if quote == _SINGLE:
            break

    if i != len(literal) - 1 or literal[i] != quote:
        raise _syntax_error()
    return bytes(out)

"""Decode one character or escape sequence of a Go quoted literal."""

from ._decode_rune import _decode_rune
from .TransformError import TransformError

_BACKSLASH = 0x5C
_SIMPLE_ESCAPES = {
    ord("a"): 0x07,
    ord("b"): 0x08,
    ord("f"): 0x0C,
    ord("n"): 0x0A,
    ord("r"): 0x0D,
    ord("t"): 0x09,
    ord("v"): 0x0B,
    _BACKSLASH: _BACKSLASH,
}
_HEX_WIDTHS = {ord("x"): 2, ord("u"): 4, ord("U"): 8}
_HEX_DIGITS = b"0123456789ABCDEFabcdef"
_OCTAL_DIGITS = b"01234567"


def _syntax_error() -> TransformError:
    return TransformError("invalid syntax in quoted literal")


def _unquote_go_char(buf: bytes, i: int, quote: int) -> tuple[int, bool, int]:
    """Decode the character at buf[i] inside a literal delimited by quote.

    Returns:
        (value, multibyte, next index). When multibyte is False the value is a
        raw byte (plain ASCII, ``\\xNN`` or octal); otherwise it is a code
        point to be written as UTF-8.

    Raises:
        TransformError: On a malformed escape
    """
    c = buf[i]
    if c >= 0x80:
        code, size = _decode_rune(buf, i)
        return code, True, i + size
    if c != _BACKSLASH:
        return c, False, i + 1
    if i + 1 >= len(buf):
        raise _syntax_error()

    escape = buf[i + 1]
    i += 2
    if escape in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[escape], False, i

    if escape in _HEX_WIDTHS:
        width = _HEX_WIDTHS[escape]
        digits = buf[i : i + width]
        if len(digits) < width or any(d not in _HEX_DIGITS for d in digits):
            raise _syntax_error()
        value = int(digits, 16)
        if escape == ord("x"):
            return value, False, i + width
        if value > 0x10FFFF or 0xD800 <= value <= 0xDFFF:
            raise _syntax_error()
        return value, True, i + width

    if escape in _OCTAL_DIGITS:
        digits = buf[i - 1 : i + 2]
        if len(digits) < 3 or any(d not in _OCTAL_DIGITS for d in digits):
            raise _syntax_error()
        value = int(digits, 8)
        if value > 0xFF:
            raise _syntax_error()
        return value, False, i + 2

    # \' and \" are only valid inside their own kind of literal
    if escape in (0x22, 0x27) and escape == quote:
        return escape, False, i
    raise _syntax_error()

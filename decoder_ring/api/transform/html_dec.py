"""HTML unescaper."""

import html
import re

from ._CP1252_C1 import CP1252_C1

# One character reference; the named form mirrors html.unescape's own pattern
_REFERENCE = re.compile(r"&(#[0-9]+;?|#[xX][0-9a-fA-F]+;?|[^\t\n\f <&#;]{1,32};?)")


def _numeric_reference(digits: str) -> str:
    code = int(digits[1:], 16) if digits[0] in "xX" else int(digits)
    if 0x80 <= code <= 0x9F:
        return CP1252_C1[code - 0x80]
    if code == 0 or 0xD800 <= code <= 0xDFFF or code > 0x10FFFF:
        return "\ufffd"
    return chr(code)


def _replace(match: re.Match) -> str:
    reference = match.group(1)
    if reference[0] == "#":
        return _numeric_reference(reference[1:].rstrip(";"))
    return html.unescape(match.group(0))


def html_dec(src: bytes) -> bytes:
    """Unescape named and numeric character references.

    Numeric references keep every code point they name, control characters
    and noncharacters included. C1 references (0x80-0x9F) are read as
    Windows-1252; zero, surrogates and values beyond U+10FFFF become U+FFFD.
    A stray '&' that does not start a reference passes through unchanged.
    Bytes that are not valid UTF-8 are carried through untouched.
    """
    text = src.decode("utf-8", errors="surrogateescape")
    return _REFERENCE.sub(_replace, text).encode("utf-8", errors="surrogateescape")

"""Quoted-printable decoder (RFC 2045)."""

import re

from .TransformError import TransformError

_LINES = re.compile(rb"[^\n]*\n|[^\n]+")
_HEX_DIGITS = b"0123456789ABCDEFabcdef"
_DISCARDED = b" \t\r\n"


def _join_line(whole: bytes) -> bytes:
    """Strip trailing whitespace, resolve a soft break, keep a hard break as written."""
    line = whole.rstrip(_DISCARDED)
    if line.endswith(b"="):
        stripped = whole[len(line) :]
        line = line[:-1]
        at_end = not stripped and bool(line)
        if not (stripped.startswith(b"\n") or stripped.startswith(b"\r\n") or at_end):
            raise TransformError(f"quoted-printable: invalid bytes after =: {stripped!r}")
        return line
    if whole.endswith(b"\r\n"):
        return line + b"\r\n"
    if whole.endswith(b"\n"):
        return line + b"\n"
    return line


def qp_dec(src: bytes) -> bytes:
    """Decode quoted-printable text.

    Hex escapes may use either case. An '=' followed by something other than
    two hex digits is kept literally unless the line ends right after it.
    Bytes at or above 0x80 are accepted unescaped; other control bytes apart
    from tab, CR and LF are rejected.
    """
    out = bytearray()
    for whole in _LINES.findall(src):
        line = _join_line(whole)
        i = 0
        while i < len(line):
            b = line[i]
            if b == 0x3D:
                pair = line[i + 1 : i + 3]
                if len(pair) == 2 and pair[0] in _HEX_DIGITS and pair[1] in _HEX_DIGITS:
                    out.append(int(pair, 16))
                    i += 3
                    continue
                if len(line) - i < 2 or line[i + 1] in b"\r\n":
                    raise TransformError(f"quoted-printable: truncated escape {line[i:i + 3]!r}")
            elif (b < 0x20 and b not in b"\t\r\n") or b == 0x7F:
                raise TransformError(f"quoted-printable: invalid unescaped byte 0x{b:02x} in body")
            out.append(b)
            i += 1
    return bytes(out)

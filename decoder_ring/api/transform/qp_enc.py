"""Quoted-printable encoder (RFC 2045)."""

_LINE_MAX_LEN = 76
_WHITESPACE = (0x20, 0x09)
_CR, _LF, _EQUALS = 0x0D, 0x0A, 0x3D


def _is_literal(b: int) -> bool:
    return (0x21 <= b <= 0x7E and b != _EQUALS) or b in _WHITESPACE


def qp_enc(src: bytes) -> bytes:
    """Encode src as quoted-printable text.

    Lines are at most 76 characters, continued with '=' soft breaks. CR, LF
    and CRLF in the input all become CRLF. '=', control and non-ASCII bytes
    are written as ``=XX``, and a space or tab left at the end of a line (or
    of the input) is escaped too.
    """
    out = bytearray()
    line = bytearray()
    after_cr = False

    def insert_crlf() -> None:
        line.extend(b"\r\n")
        out.extend(line)
        line.clear()

    def insert_soft_break() -> None:
        line.extend(b"=")
        insert_crlf()

    def escape(b: int) -> None:
        if _LINE_MAX_LEN - 1 - len(line) < 3:
            insert_soft_break()
        line.extend(b"=%02X" % b)

    def escape_trailing_whitespace() -> None:
        if line and line[-1] in _WHITESPACE:
            escape(line.pop())

    for b in src:
        if b in (_CR, _LF):
            # the LF of a CRLF pair was already written with the CR
            if after_cr and b == _LF:
                after_cr = False
                continue
            if b == _CR:
                after_cr = True
            escape_trailing_whitespace()
            insert_crlf()
        elif _is_literal(b):
            if len(line) == _LINE_MAX_LEN - 1:
                insert_soft_break()
            line.append(b)
            after_cr = False
        else:
            escape(b)

    escape_trailing_whitespace()
    out.extend(line)
    return bytes(out)

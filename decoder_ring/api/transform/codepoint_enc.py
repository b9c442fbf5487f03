"""Dump input as one line per Unicode code point."""

from ._codepoint_name import _codepoint_name


def codepoint_enc(src: bytes) -> bytes:
    """List each code point as ``U+XXXX<TAB>char<TAB>NAME``.

    Each byte that is not valid UTF-8 counts as U+FFFD. Characters that are
    not printable are shown as U+FFFD. Lines are joined with newlines and the
    last line has no terminator.
    """
    lines = []
    for ch in src.decode("utf-8", errors="surrogateescape"):
        if 0xDC80 <= ord(ch) <= 0xDCFF:
            ch = "\ufffd"
        shown = ch if ch.isprintable() else "\ufffd"
        lines.append(f"U+{ord(ch):04X}\t{shown}\t{_codepoint_name(ch)}")
    return "\n".join(lines).encode("utf-8")

"""Decode one UTF-8 sequence from a byte buffer."""

_REPLACEMENT = 0xFFFD


def _sequence_length(lead: int) -> int:
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 1


def _decode_rune(buf: bytes, i: int) -> tuple[int, int]:
    """Return (code point, byte length) of the sequence starting at buf[i].

    An invalid or truncated sequence yields (U+FFFD, 1) so that decoding
    resumes at the next byte.
    """
    size = _sequence_length(buf[i])
    if size > 1:
        try:
            return ord(buf[i : i + size].decode("utf-8")), size
        except UnicodeDecodeError:
            pass
    return _REPLACEMENT, 1

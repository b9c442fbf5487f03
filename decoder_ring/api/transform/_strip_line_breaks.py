"""Drop CR and LF bytes before alphabet decoding."""


def _strip_line_breaks(src: bytes) -> bytes:
    return src.replace(b"\r", b"").replace(b"\n", b"")

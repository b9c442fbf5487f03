"""Percent-encoding for a URL path segment."""

from urllib.parse import quote

# Sub-delimiters RFC 3986 allows in a segment; "/", ";" and "," are escaped
_SEGMENT_SAFE = "$&+:=@"


def url_path_enc(src: bytes) -> bytes:
    return quote(src, safe=_SEGMENT_SAFE).encode("ascii")

"""Percent-decoding for a URL path segment."""

from urllib.parse import unquote_to_bytes

from ._check_percent_escapes import _check_percent_escapes


def url_path_dec(src: bytes) -> bytes:
    """Percent-decode src; '+' is left as is."""
    _check_percent_escapes(src)
    return unquote_to_bytes(src)

"""Percent-decoding for a URL query component."""

from urllib.parse import unquote_to_bytes

from ._check_percent_escapes import _check_percent_escapes


def url_query_dec(src: bytes) -> bytes:
    _check_percent_escapes(src)
    return unquote_to_bytes(src.replace(b"+", b" "))

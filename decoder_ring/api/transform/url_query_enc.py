"""Percent-encoding for a URL query component."""

from urllib.parse import quote_plus


def url_query_enc(src: bytes) -> bytes:
    """Escape everything but unreserved characters; space becomes '+'."""
    return quote_plus(src, safe="").encode("ascii")

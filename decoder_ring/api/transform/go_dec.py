"""Decode a Go string literal, quoted or bare."""

from ._unquote_go_literal import _unquote_go_literal
from ._wrap_bare_literal import _wrap_bare_literal


def go_dec(src: bytes) -> bytes:
    """Unquote src as a Go literal.

    Bare input (not starting with ", ` or ') is wrapped in double quotes
    first, so escaped text can be pasted without its delimiters.
    """
    return _unquote_go_literal(_wrap_bare_literal(src, b"\"`'"))

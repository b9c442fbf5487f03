"""Quote bare input so it can be decoded as a literal."""


def _wrap_bare_literal(src: bytes, openers: bytes) -> bytes:
    """Wrap src in double quotes unless it is empty or starts with one of openers.

    Lets raw text be decoded as if it had been quoted already. Input that
    starts with an opener is taken to be delimited by it.
    """
    if src and src[0] not in openers:
        return b'"' + src + b'"'
    return src

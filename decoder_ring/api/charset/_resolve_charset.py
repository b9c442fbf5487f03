"""Resolve a character-set name through Python's codec registry."""

import codecs


def _resolve_charset(name: str) -> str | None:
    """Get the canonical codec name for a text encoding, or None.

    Names are matched case-insensitively, aliases included. Codecs that are
    not text encodings (base64, zlib, rot13, ...) do not resolve.
    """
    try:
        info = codecs.lookup(name)
        # str.encode only accepts text encodings; some (undefined) refuse all input
        "".encode(info.name)
    except (LookupError, ValueError):
        return None
    return info.name

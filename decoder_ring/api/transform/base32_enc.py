"""RFC 4648 base32 encoder."""

import base64


def base32_enc(src: bytes) -> bytes:
    return base64.b32encode(src)

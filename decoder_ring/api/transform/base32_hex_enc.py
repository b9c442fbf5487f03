"""RFC 4648 base32 "extended hex" encoder."""

import base64


def base32_hex_enc(src: bytes) -> bytes:
    return base64.b32hexencode(src)

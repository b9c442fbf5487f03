"""RFC 4648 base64 encoder."""

import base64


def base64_enc(src: bytes) -> bytes:
    return base64.b64encode(src)

"""RFC 4648 URL-safe base64 encoder."""

import base64


def base64_url_enc(src: bytes) -> bytes:
    return base64.urlsafe_b64encode(src)

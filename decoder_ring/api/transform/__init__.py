"""Transform set: pure bytes-to-bytes functions, one per mode direction."""

from .base32_crockford_dec import base32_crockford_dec
from .base32_crockford_enc import base32_crockford_enc
from .base32_dec import base32_dec
from .base32_enc import base32_enc
from .base32_hex_dec import base32_hex_dec
from .base32_hex_enc import base32_hex_enc
from .base64_dec import base64_dec
from .base64_enc import base64_enc
from .base64_url_dec import base64_url_dec
from .base64_url_enc import base64_url_enc
from .codepoint_enc import codepoint_enc
from .float16_hex_dec import float16_hex_dec
from .float16_hex_enc import float16_hex_enc
from .float32_hex_dec import float32_hex_dec
from .float32_hex_enc import float32_hex_enc
from .go_dec import go_dec
from .go_enc import go_enc
from .hex_dec import hex_dec
from .hex_enc import hex_enc
from .hex_ext_enc import hex_ext_enc
from .html_dec import html_dec
from .html_enc import html_enc
from .json_dec import json_dec
from .json_enc import json_enc
from .qp_dec import qp_dec
from .qp_enc import qp_enc
from .rot13 import rot13
from .Transform import Transform
from .TransformError import TransformError
from .url_path_dec import url_path_dec
from .url_path_enc import url_path_enc
from .url_query_dec import url_query_dec
from .url_query_enc import url_query_enc

__all__ = [
    "Transform",
    "TransformError",
    "base32_crockford_dec",
    "base32_crockford_enc",
    "base32_dec",
    "base32_enc",
    "base32_hex_dec",
    "base32_hex_enc",
    "base64_dec",
    "base64_enc",
    "base64_url_dec",
    "base64_url_enc",
    "codepoint_enc",
    "float16_hex_dec",
    "float16_hex_enc",
    "float32_hex_dec",
    "float32_hex_enc",
    "go_dec",
    "go_enc",
    "hex_dec",
    "hex_enc",
    "hex_ext_enc",
    "html_dec",
    "html_enc",
    "json_dec",
    "json_enc",
    "qp_dec",
    "qp_enc",
    "rot13",
    "url_path_dec",
    "url_path_enc",
    "url_query_dec",
    "url_query_enc",
]

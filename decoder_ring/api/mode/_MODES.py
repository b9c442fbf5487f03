"""Static mode registry."""

from ..transform import (
    base32_crockford_dec,
    base32_crockford_enc,
    base32_dec,
    base32_enc,
    base32_hex_dec,
    base32_hex_enc,
    base64_dec,
    base64_enc,
    base64_url_dec,
    base64_url_enc,
    codepoint_enc,
    float16_hex_dec,
    float16_hex_enc,
    float32_hex_dec,
    float32_hex_enc,
    go_dec,
    go_enc,
    hex_dec,
    hex_enc,
    hex_ext_enc,
    html_dec,
    html_enc,
    json_dec,
    json_enc,
    qp_dec,
    qp_enc,
    rot13,
    url_path_dec,
    url_path_enc,
    url_query_dec,
    url_query_enc,
)
from .Mode import Mode

# Registry of available modes, keyed by case-sensitive name
MODES: dict[str, Mode] = {
    mode.name: mode
    for mode in (
        Mode("base32", base32_dec, base32_enc),
        Mode("base32-crockford", base32_crockford_dec, base32_crockford_enc),
        Mode("base32-hex", base32_hex_dec, base32_hex_enc),
        Mode("base64", base64_dec, base64_enc),
        Mode("base64-url", base64_url_dec, base64_url_enc),
        Mode("codepoint", None, codepoint_enc),
        Mode("float16-hex", float16_hex_dec, float16_hex_enc),
        Mode("float32-hex", float32_hex_dec, float32_hex_enc),
        Mode("go", go_dec, go_enc),
        Mode("hex", hex_dec, hex_enc),
        Mode("hex-extended", None, hex_ext_enc),
        Mode("html", html_dec, html_enc),
        Mode("json", json_dec, json_enc),
        Mode("qp", qp_dec, qp_enc),
        Mode("rot13", rot13, rot13),
        Mode("url-path", url_path_dec, url_path_enc),
        Mode("url-query", url_query_dec, url_query_enc),
    )
}

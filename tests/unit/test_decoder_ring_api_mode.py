"""Tests for the mode registry, lookup and listing."""

import pytest

from decoder_ring.api.Direction import Direction
from decoder_ring.api.mode import Mode, enumerate_modes, lookup, lookup_static
from decoder_ring.api.mode._MODES import MODES
from decoder_ring.api.transform import codepoint_enc, hex_dec, hex_enc, rot13

pytestmark = pytest.mark.unit

EXPECTED_MODES = [
    "base32",
    "base32-crockford",
    "base32-hex",
    "base64",
    "base64-url",
    "codepoint*",
    "float16-hex",
    "float32-hex",
    "go",
    "hex",
    "hex-extended*",
    "html",
    "json",
    "qp",
    "rot13",
    "url-path",
    "url-query",
]


class TestMode:
    def test_requires_a_transform(self):
        with pytest.raises(ValueError, match="must define"):
            Mode("empty")

    def test_encode_only(self):
        mode = Mode("dump", encoder=codepoint_enc)
        assert mode.encode_only
        assert mode.transform(Direction.ENCODE) is codepoint_enc
        assert mode.transform(Direction.DECODE) is None

    def test_both_directions(self):
        mode = Mode("hex", hex_dec, hex_enc)
        assert not mode.encode_only
        assert mode.transform(Direction.DECODE) is hex_dec
        assert mode.transform(Direction.ENCODE) is hex_enc


class TestRegistry:
    def test_every_mode_keyed_by_own_name(self):
        assert all(name == mode.name for name, mode in MODES.items())

    def test_rot13_is_its_own_inverse(self):
        assert MODES["rot13"].decoder is rot13
        assert MODES["rot13"].encoder is rot13

    def test_enumerate_modes(self):
        assert enumerate_modes() == EXPECTED_MODES


class TestLookup:
    def test_static_mode(self):
        assert lookup("hex", Direction.ENCODE) is hex_enc
        assert lookup_static("hex", Direction.DECODE) is hex_dec

    def test_encode_only_mode_has_no_decoder(self):
        assert lookup("codepoint", Direction.DECODE) is None
        assert lookup("hex-extended", Direction.DECODE) is None
        assert lookup("hex-extended", Direction.ENCODE) is not None

    def test_names_are_case_sensitive(self):
        assert lookup("HEX", Direction.ENCODE) is None
        assert lookup("Base64", Direction.DECODE) is None

    def test_unknown_static_mode(self):
        assert lookup_static("latin1", Direction.DECODE) is None

    def test_falls_back_to_charset(self):
        decode = lookup("latin1", Direction.DECODE)
        assert decode is not None
        assert decode(b"\xe9") == b"\xc3\xa9"

    def test_unknown_name(self):
        assert lookup("nope", Direction.ENCODE) is None

    def test_codec_that_refuses_all_input_is_not_a_charset(self):
        assert lookup("undefined", Direction.DECODE) is None
        assert lookup("undefined", Direction.ENCODE) is None

"""Tests for character-set delegation."""

import pytest

from decoder_ring.api.charset import charset_transform
from decoder_ring.api.charset._resolve_charset import _resolve_charset
from decoder_ring.api.Direction import Direction
from decoder_ring.api.transform import TransformError

pytestmark = pytest.mark.unit


class TestResolveCharset:
    @pytest.mark.parametrize("name", ["latin1", "ISO-8859-1", "iso8859_1", "Shift_JIS", "UTF-16BE", "cp1252"])
    def test_text_encodings_resolve(self, name):
        assert _resolve_charset(name) is not None

    @pytest.mark.parametrize("name", ["no-such-charset", "base64", "zlib", "rot_13", "hex", "undefined"])
    def test_other_names_do_not_resolve(self, name):
        assert _resolve_charset(name) is None


class TestCharsetTransform:
    def test_unknown_name(self):
        assert charset_transform("no-such-charset", Direction.DECODE) is None

    def test_encode_from_utf8(self):
        encode = charset_transform("ISO-8859-1", Direction.ENCODE)
        assert encode(b"caf\xc3\xa9") == b"caf\xe9"

    def test_decode_to_utf8(self):
        decode = charset_transform("latin1", Direction.DECODE)
        assert decode(b"caf\xe9") == b"caf\xc3\xa9"

    def test_shift_jis(self):
        assert charset_transform("shift_jis", Direction.ENCODE)("あ".encode()) == b"\x82\xa0"
        assert charset_transform("shift_jis", Direction.DECODE)(b"\x82\xa0") == "あ".encode()

    def test_encode_unrepresentable_character_fails(self):
        encode = charset_transform("latin1", Direction.ENCODE)
        with pytest.raises(TransformError):
            encode("€".encode())

    def test_encode_rejects_invalid_utf8(self):
        encode = charset_transform("latin1", Direction.ENCODE)
        with pytest.raises(TransformError):
            encode(b"\xff")

    def test_decode_replaces_undecodable_bytes(self):
        decode = charset_transform("ascii", Direction.DECODE)
        assert decode(b"a\xffb") == b"a\xef\xbf\xbdb"

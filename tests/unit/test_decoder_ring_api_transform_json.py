"""Tests for the json string transform."""

import pytest

from decoder_ring.api.transform import TransformError, json_dec, json_enc

pytestmark = pytest.mark.unit


class TestJsonEncode:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (b'he said "hi"\n', b'"he said \\"hi\\"\\n"'),
            (b"<a&b>", b'"\\u003ca\\u0026b\\u003e"'),
            (b"caf\xc3\xa9", b'"caf\xc3\xa9"'),
            (b"\xff", b'"\\ufffd"'),
            (b"\x01", b'"\\u0001"'),
            ("\u2028\u2029".encode(), b'"\\u2028\\u2029"'),
            (b"", b'""'),
        ],
    )
    def test_encode(self, raw, expected):
        assert json_enc(raw) == expected


class TestJsonDecode:
    @pytest.mark.parametrize(
        ("literal", "expected"),
        [
            (b'"abc"', b"abc"),
            (b"abc", b"abc"),
            (b"a\\nb", b"a\nb"),
            (b"123", b"123"),
            (b'"\\u00e9"', b"\xc3\xa9"),
            (b'"\\ud83d\\ude00"', "\U0001f600".encode()),
            (b'"\\ud800"', b"\xef\xbf\xbd"),
            (b'"\xff"', b"\xef\xbf\xbd"),
        ],
    )
    def test_decode(self, literal, expected):
        assert json_dec(literal) == expected

    @pytest.mark.parametrize("bad", [b"", b'a"b', b"a\tb", b'"abc', b'"a" 1', b'"\\x41"'])
    def test_decode_rejects(self, bad):
        with pytest.raises(TransformError):
            json_dec(bad)

    def test_round_trip(self):
        raw = 'x "y" \\ \n\t <&> é \U0001f600 \u2028 \x00'.encode()
        assert json_dec(json_enc(raw)) == raw

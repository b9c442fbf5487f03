"""Build a transform for an IANA character set."""

from ..Direction import Direction
from ..transform.Transform import Transform
from ..transform.TransformError import TransformError
from ._resolve_charset import _resolve_charset


def charset_transform(name: str, direction: Direction) -> Transform | None:
    """Get a transform converting between UTF-8 and the named character set.

    Encoding reads UTF-8 and writes the character set; characters it cannot
    represent are an error. Decoding reads the character set and writes
    UTF-8; undecodable bytes become U+FFFD.

    Returns:
        Transform, or None if name is not a known text encoding
    """
    codec = _resolve_charset(name)
    if codec is None:
        return None

    if direction is Direction.ENCODE:

        def encode(src: bytes) -> bytes:
            try:
                return src.decode("utf-8").encode(codec)
            except UnicodeError as exc:
                raise TransformError(f"{codec}: {exc}") from exc

        return encode

    def decode(src: bytes) -> bytes:
        try:
            return src.decode(codec, errors="replace").encode("utf-8")
        except UnicodeError as exc:
            raise TransformError(f"{codec}: {exc}") from exc

    return decode

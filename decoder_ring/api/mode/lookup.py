"""Resolve a mode name to a transform (UNO: single function)."""

from ...utils.get_logger import get_logger
from ..charset.charset_transform import charset_transform
from ..transform.Transform import Transform
from ..Direction import Direction
from .lookup_static import lookup_static

logger = get_logger("mode")


def lookup(name: str, direction: Direction) -> Transform | None:
    """Get the transform for name and direction.

    The static registry is consulted first; names it cannot satisfy are tried
    as IANA character-set names. Never raises for an unknown name.

    Returns:
        Transform, or None when neither source has one
    """
    transform = lookup_static(name, direction)
    if transform is not None:
        return transform

    transform = charset_transform(name, direction)
    if transform is not None:
        logger.debug(f"Mode {name!r} resolved as a character set")
    return transform

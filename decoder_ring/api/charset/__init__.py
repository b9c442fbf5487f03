"""IANA character-set delegation."""

from .charset_transform import charset_transform

__all__ = ["charset_transform"]

"""Configuration API module."""

from .RingConfig import RingConfig

__all__ = ["RingConfig"]

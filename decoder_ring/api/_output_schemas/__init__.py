"""Output schemas for API commands."""

from .mode import ModeListOutput, ModeTransformOutput

__all__ = ["ModeListOutput", "ModeTransformOutput"]

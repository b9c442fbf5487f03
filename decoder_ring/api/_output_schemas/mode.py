"""Output schemas for mode commands."""

from pydantic import Field

from ._base import BaseOutputSchema


class ModeTransformOutput(BaseOutputSchema):
    """Output schema for the transform command.

    Output structure:
    - errors: list[str] - the transform or I/O failure, empty on success
    - warnings: list[str] - always empty
    - mode: str - mode name as given
    - direction: str - "decode" or "encode"
    - data: bytes - transformed bytes, empty on failure
    """

    mode: str = Field(..., description="Mode name as given")
    direction: str = Field(..., description="decode or encode")
    data: bytes = Field(b"", description="Transformed bytes, empty on failure")


class ModeListOutput(BaseOutputSchema):
    """Output schema for the mode list command."""

    modes: list[str] = Field(..., description="Sorted mode names, encode-only ones suffixed with '*'")

"""Registry entry for a named transform."""

from dataclasses import dataclass

from ..transform.Transform import Transform
from ..Direction import Direction


@dataclass(frozen=True)
class Mode:
    """A named pair of transforms; either half may be absent, not both."""

    name: str
    decoder: Transform | None = None
    encoder: Transform | None = None

    def __post_init__(self) -> None:
        if self.decoder is None and self.encoder is None:
            raise ValueError(f"Mode {self.name!r} must define a decoder or an encoder")

    @property
    def encode_only(self) -> bool:
        return self.decoder is None

    def transform(self, direction: Direction) -> Transform | None:
        """Get the transform for direction, or None if this mode lacks it."""
        return self.encoder if direction is Direction.ENCODE else self.decoder

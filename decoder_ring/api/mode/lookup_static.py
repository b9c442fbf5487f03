"""Look up a transform in the static registry only."""

from ..transform.Transform import Transform
from ._MODES import MODES
from ..Direction import Direction


def lookup_static(name: str, direction: Direction) -> Transform | None:
    """Get the registered transform for name and direction.

    Returns:
        The transform, or None if the mode is unknown or lacks direction
    """
    mode = MODES.get(name)
    if mode is None:
        return None
    return mode.transform(direction)

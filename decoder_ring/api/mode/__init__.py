"""Mode registry: names to transforms."""

from ..Direction import Direction
from .cmd_list import cmd_list
from .cmd_transform import cmd_transform
from .enumerate_modes import enumerate_modes
from .lookup import lookup
from .lookup_static import lookup_static
from .Mode import Mode

__all__ = [
    "Direction",
    "Mode",
    "cmd_list",
    "cmd_transform",
    "enumerate_modes",
    "lookup",
    "lookup_static",
]

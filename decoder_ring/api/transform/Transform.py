"""Transform function signature."""

from collections.abc import Callable

# bytes in, bytes out; malformed input raises TransformError
Transform = Callable[[bytes], bytes]

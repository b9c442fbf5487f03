"""StageResult dataclass for the command pattern."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """Result from a command function.

    The command returns immediately; running ``progress_callback`` does the
    work, yielding (progress, message) tuples and filling in result, output
    and success.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False

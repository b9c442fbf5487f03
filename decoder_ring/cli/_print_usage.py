"""Print usage text to stderr."""

from rich.console import Console

from ..api.config.RingConfig import RingConfig
from ._render_usage import _render_usage


def _print_usage(prog: str, config: RingConfig) -> None:
    console = Console(stderr=True, markup=False, emoji=False, highlight=False, soft_wrap=True)
    console.print(
        _render_usage(prog, config.default_encode, config.strip_newline, config.emit_newline),
        end="",
    )

"""Typer command that also accepts ``-flag=value`` booleans."""

import click
from typer.core import TyperCommand

from ._normalize_bool_flags import _normalize_bool_flags


class _RingCommand(TyperCommand):
    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        return super().parse_args(ctx, _normalize_bool_flags(args))

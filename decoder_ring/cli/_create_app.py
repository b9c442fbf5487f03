"""Create the decoder-ring Typer CLI app."""

from typing import Annotated

import click
import typer

from ..api.config.RingConfig import RingConfig
from ..api.Direction import Direction
from ..api.mode.cmd_transform import cmd_transform
from ..api.mode.lookup import lookup
from ..utils.get_logger import get_logger
from ..utils.get_package_version import get_package_version
from ._print_usage import _print_usage
from ._RingCommand import _RingCommand

logger = get_logger("cli")


def _create_app(config: RingConfig, prog: str = "decoder-ring") -> typer.Typer:
    """Create the CLI app with defaults taken from config.

    Exit status: 0 on success, 1 on a transform or I/O failure, 2 with usage
    text for a bad invocation or a mode that cannot be resolved.
    """
    app = typer.Typer(
        name=prog,
        help="Transcode stdin to stdout with a named transform.",
        add_completion=False,
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
    )

    @app.command(cls=_RingCommand)
    def transcode(
        mode: Annotated[list[str] | None, typer.Argument(help="Mode name or IANA encoding name")] = None,
        encode: Annotated[
            bool, typer.Option("--encode/--decode", "-encode", "-e/-d", help="encode rather than decode")
        ] = config.default_encode,
        strip: Annotated[
            bool, typer.Option("--strip/--no-strip", "-strip", "-s/-S", help="strip one trailing newline from input")
        ] = config.strip_newline,
        emit: Annotated[
            bool, typer.Option("--emit/--no-emit", "-emit", "-t/-T", help="emit trailing newline")
        ] = config.emit_newline,
        version: Annotated[bool, typer.Option("--version", help="Show version and exit")] = False,
    ) -> None:
        if version:
            typer.echo(f"{prog} {get_package_version()}")
            raise typer.Exit()

        if mode is None or len(mode) != 1:
            _print_usage(prog, config)
            raise typer.Exit(2)

        name = mode[0]
        direction = Direction.ENCODE if encode else Direction.DECODE
        if lookup(name, direction) is None:
            logger.info(f"No {direction.value} transform for mode {name!r}")
            _print_usage(prog, config)
            raise typer.Exit(2)

        try:
            data = click.get_binary_stream("stdin").read()
        except OSError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from None

        result = cmd_transform(name, direction, data, strip_newline=strip, emit_newline=emit)
        for _, message in result.progress_callback(result):
            logger.debug(message)

        if not result.success:
            logger.info(result.result)
            typer.echo(f"Error: {result.result}", err=True)
            raise typer.Exit(1)

        try:
            stdout = click.get_binary_stream("stdout")
            stdout.write(result.output["data"])
            stdout.flush()
        except OSError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from None
        logger.debug(result.result)

    return app

"""CLI - main entry point."""

import sys
from pathlib import Path


def main(argv: list[str] | None = None, prog: str | None = None) -> int:
    """Main CLI entry point.

    Args:
        argv: Arguments without the program name (default sys.argv[1:])
        prog: Program path as invoked (default sys.argv[0]); ``encoder-ring``
            makes encoding the default direction
    """
    import click
    import typer

    from decoder_ring.api.config.RingConfig import RingConfig
    from decoder_ring.cli._create_app import _create_app
    from decoder_ring.cli._print_usage import _print_usage
    from decoder_ring.utils.configure_logging import configure_logging

    if argv is None:
        argv = sys.argv[1:]
    if prog is None:
        prog = sys.argv[0]

    try:
        config = RingConfig.load(prog)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        return 1
    configure_logging(config.log_level, config.log_file)

    prog_name = Path(prog).name or "decoder-ring"
    app = _create_app(config, prog_name)
    try:
        return app(argv, prog_name=prog_name, standalone_mode=False) or 0
    except click.exceptions.UsageError as e:
        _print_usage(prog_name, config)
        typer.echo(f"Usage error: {e.format_message()}", err=True)
        return 2
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1

"""Create the main Typer CLI app."""

import logging
from pathlib import Path

import typer

from svcreinstall.cli.reinstall import reinstall_command
from svcreinstall.cli.service import find_command
from svcreinstall.logging_config import setup_logging


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Reinstall a Windows service from a rebuilt executable",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.command(name="reinstall")(reinstall_command)
    app.command(name="find")(find_command)

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
        verbose: bool = typer.Option(False, "--verbose", "-V", help="Log every step to stderr"),
        log_file: Path | None = typer.Option(None, "--log-file", help="Also write the log to this file"),  # noqa: B008
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        setup_logging(level=logging.DEBUG if verbose else logging.WARNING, log_file=log_file)

        # Store display format in context for use by commands
        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app

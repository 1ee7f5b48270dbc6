"""Service lookup command for the CLI."""

import typer

from svcreinstall.api.service.cmd_find import cmd_find
from svcreinstall.cli._handle_stage_result import _handle_stage_result


def find_command(
    name: str = typer.Argument(..., help="Name fragment to match against service and display names"),
) -> None:
    """List registered services whose name contains NAME."""
    _handle_stage_result(cmd_find)(name=name)

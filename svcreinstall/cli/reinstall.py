"""Reinstall command for the CLI."""

from pathlib import Path

import typer

from svcreinstall.api.reinstall.cmd_reinstall import cmd_reinstall
from svcreinstall.cli._handle_stage_result import _handle_stage_result
from svcreinstall.constants import DEFAULT_INSTALLER_DIR, DEFAULT_WAIT_TIME


def reinstall_command(
    service_path: Path = typer.Argument(..., help="Path to the rebuilt service executable"),  # noqa: B008
    service_name: str | None = typer.Option(
        None, "--service-name", "-n", help="Registered service name (default: executable name without extension)"
    ),
    dotnet_path: Path = typer.Option(  # noqa: B008
        DEFAULT_INSTALLER_DIR, "--dotnet-path", help="Directory containing InstallUtil.exe"
    ),
    start_after_install: bool = typer.Option(
        True, "--start-after-install/--no-start-after-install", help="Start the service after installing"
    ),
    wait_time: int = typer.Option(
        DEFAULT_WAIT_TIME, "--wait-time", "-w", min=0, help="Seconds to wait for registration before starting"
    ),
) -> None:
    """Stop, uninstall, reinstall and start a service."""
    _handle_stage_result(cmd_reinstall)(
        service_path=service_path,
        service_name=service_name,
        dotnet_path=dotnet_path,
        start_after_install=start_after_install,
        wait_time=wait_time,
    )

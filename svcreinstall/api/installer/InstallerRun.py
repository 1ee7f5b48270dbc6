"""Installer invocation DTO."""

from dataclasses import dataclass


@dataclass(frozen=True)
class InstallerRun:
    """A completed installer invocation."""

    args: list[str]
    """Full command line, installer path first."""

    returncode: int
    """Process exit code."""

    output: str
    """Combined stdout and stderr."""

"""Derive a service name from the service executable."""

from pathlib import Path, PureWindowsPath


def resolve_service_name(executable_path: Path | str, declared_name: str | None = None) -> str:
    """Return the declared name, or the executable filename without its extension.

    Only the last extension is removed, so 'My.Service.exe' gives 'My.Service'.
    Both '\\' and '/' are accepted as separators.
    """
    if declared_name:
        return declared_name
    return PureWindowsPath(str(executable_path)).stem

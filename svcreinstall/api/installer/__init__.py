"""Installer module - drives the external service installer executable."""

from .Installer import Installer
from .InstallerError import InstallerError
from .InstallerRun import InstallerRun

__all__ = ["Installer", "InstallerError", "InstallerRun"]

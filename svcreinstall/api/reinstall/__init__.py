"""Reinstall module - stop, uninstall, install and start a service."""

from .InstallRequest import InstallRequest
from .PhaseResult import Outcome, PhaseResult
from .ReinstallReport import ReinstallReport
from .resolve_service_name import resolve_service_name
from .RunState import RunState
from .ServiceReinstallOrchestrator import ServiceReinstallOrchestrator

__all__ = [
    "InstallRequest",
    "Outcome",
    "PhaseResult",
    "ReinstallReport",
    "RunState",
    "ServiceReinstallOrchestrator",
    "resolve_service_name",
]

"""In-memory stand-ins for the service manager and the installer.

We prefer not to use mocks, but there is no way to exercise the reinstall
sequence against a real Service Control Manager in unit tests.
"""

from dataclasses import replace
from pathlib import Path

from svcreinstall.api.installer import Installer, InstallerError, InstallerRun
from svcreinstall.api.service._AbstractImpl import _AbstractImpl
from svcreinstall.api.service.ServiceDescriptor import ServiceDescriptor


def svc(name: str, display_name: str | None = None, status: str = "stopped") -> ServiceDescriptor:
    return ServiceDescriptor(name=name, display_name=display_name or name, status=status)


class FakeServiceManager(_AbstractImpl):
    """Service manager that records every call.

    Args:
        services: Services returned by both list_services and get_service
        hidden: Services only reachable through get_service
        fail_stop: Names whose stop raises
        fail_start: Names whose start raises
        start_status: Status a service ends up in after start (default 'running')
    """

    def __init__(self, services=(), hidden=(), fail_stop=(), fail_start=(), start_status=None):
        self.services = {s.name: s for s in services}
        self.hidden = {s.name: s for s in hidden}
        self.fail_stop = set(fail_stop)
        self.fail_start = set(fail_start)
        self.start_status = dict(start_status or {})
        self.calls: list[tuple[str, ...]] = []

    def _lookup(self, name: str) -> ServiceDescriptor | None:
        return self.services.get(name) or self.hidden.get(name)

    def _store(self, service: ServiceDescriptor) -> None:
        if service.name in self.hidden:
            self.hidden[service.name] = service
        else:
            self.services[service.name] = service

    def list_services(self) -> list[ServiceDescriptor]:
        self.calls.append(("list",))
        return list(self.services.values())

    def get_service(self, name: str) -> ServiceDescriptor | None:
        self.calls.append(("get", name))
        return self._lookup(name)

    def stop_service(self, name: str) -> None:
        self.calls.append(("stop", name))
        if name in self.fail_stop:
            raise RuntimeError("Access is denied")
        self._store(replace(self._lookup(name), status="stopped"))

    def start_service(self, name: str) -> None:
        self.calls.append(("start", name))
        if name in self.fail_start:
            raise RuntimeError("The service did not respond to the start request")
        self._store(replace(self._lookup(name), status=self.start_status.get(name, "running")))


class FakeInstaller(Installer):
    """Installer that records invocations instead of running InstallUtil.exe."""

    def __init__(self, installer_dir: Path, fail_install: bool = False, fail_uninstall: bool = False):
        super().__init__(installer_dir)
        self.fail_install = fail_install
        self.fail_uninstall = fail_uninstall
        self.calls: list[list[str]] = []

    def _invoke(self, arguments: list[str]) -> InstallerRun:
        self.calls.append(arguments)
        uninstalling = arguments[0] == "/u"
        if (uninstalling and self.fail_uninstall) or (not uninstalling and self.fail_install):
            raise InstallerError(
                "InstallUtil.exe exited with code 1",
                output="An exception occurred during the Install phase.",
                returncode=1,
            )
        return InstallerRun(
            args=[str(self.path), *arguments],
            returncode=0,
            output="The Commit phase completed successfully.",
        )

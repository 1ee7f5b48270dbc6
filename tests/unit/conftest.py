"""Unit test fixtures.

Fake collaborators live in _fakes.py; this file wires them into an
orchestrator backed by real files under tmp_path.
"""

from pathlib import Path

import pytest
from _fakes import FakeInstaller, FakeServiceManager

from svcreinstall.api.reinstall import InstallRequest, ServiceReinstallOrchestrator


@pytest.fixture
def installer_dir(tmp_path: Path) -> Path:
    """Directory holding an (empty) InstallUtil.exe."""
    directory = tmp_path / "Framework64" / "v4.0.30319"
    directory.mkdir(parents=True)
    (directory / "InstallUtil.exe").write_bytes(b"")
    return directory


@pytest.fixture
def service_exe(tmp_path: Path) -> Path:
    path = tmp_path / "build" / "My.Service.exe"
    path.parent.mkdir(parents=True)
    path.write_bytes(b"MZ")
    return path


@pytest.fixture
def sleeps() -> list[float]:
    """Records every delay requested by the orchestrator."""
    return []


@pytest.fixture
def make_orchestrator(installer_dir: Path, service_exe: Path, sleeps: list[float]):
    """Factory building an orchestrator around fake collaborators.

    Extra keyword arguments go to InstallRequest.
    """

    def _make(scm=None, installer=None, admin=True, **request_kwargs):
        request_kwargs.setdefault("executable_path", service_exe)
        request_kwargs.setdefault("installer_dir", installer_dir)
        request = InstallRequest(**request_kwargs)
        return ServiceReinstallOrchestrator(
            request,
            scm=scm if scm is not None else FakeServiceManager(),
            installer=installer if installer is not None else FakeInstaller(request.installer_dir),
            sleep=sleeps.append,
            is_admin=lambda: admin,
        )

    return _make

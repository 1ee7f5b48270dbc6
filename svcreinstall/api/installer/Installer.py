"""Service installer wrapper (InstallUtil.exe)."""

import subprocess
from pathlib import Path

from ...constants import INSTALLER_EXECUTABLE, UNINSTALL_FLAG
from ...logging_config import get_logger
from .InstallerError import InstallerError
from .InstallerRun import InstallerRun

logger = get_logger("installer")


class Installer:
    """Registers and unregisters services through the platform installer utility.

    The installer runs with its own directory as working directory; the
    caller's working directory is never changed.
    """

    def __init__(self, installer_dir: Path, executable: str = INSTALLER_EXECUTABLE):
        self.installer_dir = Path(installer_dir)
        self.executable = executable

    @property
    def path(self) -> Path:
        """Absolute path of the installer executable."""
        return self.installer_dir / self.executable

    def install(self, target: Path) -> InstallerRun:
        """Register the service(s) contained in target."""
        return self._invoke([str(target)])

    def uninstall(self, target: Path) -> InstallerRun:
        """Unregister the service(s) contained in target."""
        return self._invoke([UNINSTALL_FLAG, str(target)])

    def _invoke(self, arguments: list[str]) -> InstallerRun:
        args = [str(self.path), *arguments]
        logger.info("Running %s", " ".join(args))
        try:
            completed = subprocess.run(
                args,
                cwd=str(self.installer_dir),
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                check=False,
            )
        except OSError as e:
            raise InstallerError(f"Failed to launch {self.path}: {e}") from e

        output = completed.stdout or ""
        logger.debug("Installer output:\n%s", output)
        if completed.returncode != 0:
            raise InstallerError(
                f"{self.executable} exited with code {completed.returncode}",
                output=output,
                returncode=completed.returncode,
            )
        return InstallerRun(args=args, returncode=completed.returncode, output=output)

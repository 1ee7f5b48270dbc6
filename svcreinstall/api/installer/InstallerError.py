"""Installer failure exception."""


class InstallerError(RuntimeError):
    """Raised when the installer cannot be launched or exits with a non-zero code."""

    def __init__(self, message: str, output: str = "", returncode: int | None = None):
        super().__init__(message)
        self.output = output
        self.returncode = returncode

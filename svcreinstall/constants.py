"""Constants for svcreinstall."""

from pathlib import Path

PACKAGE_NAME = "svcreinstall"

# .NET Framework 4.x, 64-bit
DEFAULT_INSTALLER_DIR = Path(r"C:\Windows\Microsoft.NET\Framework64\v4.0.30319")
INSTALLER_EXECUTABLE = "InstallUtil.exe"
UNINSTALL_FLAG = "/u"

# Seconds to let the SCM settle between stop/uninstall and uninstall/install
PHASE_DELAY_SECONDS = 2
DEFAULT_WAIT_TIME = 5

# Upper bound for a single service to reach the running state after a start request
START_TIMEOUT_SECONDS = 30

SERVICE_RUNNING = "running"

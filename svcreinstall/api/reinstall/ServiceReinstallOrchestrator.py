"""Stop, uninstall, reinstall and restart a service in a fixed sequence."""

import time
from collections.abc import Callable, Iterator
from contextlib import ExitStack

from ...constants import PHASE_DELAY_SECONDS, SERVICE_RUNNING
from ...logging_config import get_logger
from ..installer import Installer, InstallerError
from ..service import Service, match_services
from ..service._AbstractImpl import _AbstractImpl
from ._is_admin import _is_admin
from .InstallRequest import InstallRequest
from .PhaseResult import PhaseResult
from .ReinstallReport import ReinstallReport
from .RunState import RunState

logger = get_logger("reinstall")


class ServiceReinstallOrchestrator:
    """Runs one reinstall against the service manager and the installer.

    Sequence: validate, stop, wait, uninstall, wait, install, wait for
    registration, start. Precondition failures and install failures are
    fatal; every other failure is recorded and the sequence continues.

    Args:
        request: What to reinstall
        scm: Service manager backend; the platform backend is opened after
            validation when omitted
        installer: Installer wrapper; built from request.installer_dir when omitted
        sleep: Delay function (seconds)
        is_admin: Elevation check
    """

    def __init__(
        self,
        request: InstallRequest,
        scm: _AbstractImpl | Service | None = None,
        installer: Installer | None = None,
        sleep: Callable[[float], None] = time.sleep,
        is_admin: Callable[[], bool] = _is_admin,
    ):
        self.request = request
        self.installer = installer or Installer(request.installer_dir)
        self._scm = scm
        self._sleep = sleep
        self._is_admin = is_admin
        self.report: ReinstallReport | None = None

    def run(self) -> int:
        """Execute the whole sequence and return the process exit code."""
        report = self.new_report()
        for _progress, message in self.steps(report):
            logger.info(message)
        return report.exit_code

    def new_report(self) -> ReinstallReport:
        self.report = ReinstallReport(
            service_path=str(self.request.executable_path),
            auto_start=self.request.auto_start,
        )
        return self.report

    def validate(self) -> str | None:
        """Check preconditions in order; return the first violation or None."""
        request = self.request
        if not self._is_admin():
            return "Administrator privileges are required. Re-run from an elevated prompt."
        if not request.installer_dir.is_dir():
            return f"Installer directory not found: {request.installer_dir}"
        if not self.installer.path.is_file():
            return f"{self.installer.executable} not found in {request.installer_dir}"
        if not request.executable_path.exists():
            return f"Service executable not found: {request.executable_path}"
        return None

    def steps(self, report: ReinstallReport) -> Iterator[tuple[float, str]]:
        """Generator form of run(); yields (progress, message) and fills report."""
        report.state = RunState.VALIDATING
        yield (0.05, "Validating prerequisites...")
        error = self.validate()
        if error:
            logger.error(error)
            report.fail(error)
            yield (1.0, "Complete")
            return

        report.service_name = self.request.resolved_service_name
        report.name_guessed = self.request.name_guessed
        if report.name_guessed:
            warning = (
                f"No service name given; guessing {report.service_name!r} from the executable name. "
                "The registered name is whatever the installer reports and may differ."
            )
            logger.warning(warning)
            report.warnings.append(warning)

        with ExitStack() as stack:
            scm = self._scm
            if scm is None:
                try:
                    scm = stack.enter_context(Service())
                except (RuntimeError, ValueError) as e:
                    report.fail(f"Service manager unavailable: {e}")
                    yield (1.0, "Complete")
                    return
            yield from self._execute(scm, report)

    def _execute(self, scm, report: ReinstallReport) -> Iterator[tuple[float, str]]:
        name = report.service_name
        executable = self.request.executable_path

        report.state = RunState.STOPPING
        yield (0.1, f"Stopping service {name}...")
        report.add(self._stop_phase(scm, name))

        yield (0.2, f"Waiting {PHASE_DELAY_SECONDS}s for the service manager...")
        self._sleep(PHASE_DELAY_SECONDS)

        report.state = RunState.UNINSTALLING
        yield (0.3, f"Uninstalling {executable}...")
        report.add(self._uninstall_phase())

        yield (0.4, f"Waiting {PHASE_DELAY_SECONDS}s for the service manager...")
        self._sleep(PHASE_DELAY_SECONDS)

        report.state = RunState.INSTALLING
        yield (0.5, f"Installing {executable}...")
        report.add(self._install_phase(), fatal=True)
        if report.state is RunState.FAILED:
            yield (1.0, "Complete")
            return

        report.state = RunState.AWAITING_REGISTRATION
        wait_time = self.request.wait_time
        yield (0.7, f"Waiting {wait_time}s for service registration...")
        self._sleep(wait_time)

        if self.request.auto_start:
            report.state = RunState.STARTING
            yield (0.8, f"Starting services matching {name!r}...")
            for result in self._start_phase(scm, name):
                report.add(result)
        else:
            report.add(PhaseResult.skipped("start", "Automatic start disabled"))

        report.state = RunState.DONE
        yield (1.0, "Complete")

    def _stop_phase(self, scm, name: str) -> PhaseResult:
        try:
            existing = scm.get_service(name)
        except Exception as e:
            logger.warning("Could not query service %s: %s", name, e)
            return PhaseResult.failed("stop", f"Could not query service {name}", str(e), service=name)

        if existing is None:
            logger.info("Service %s not found, nothing to stop", name)
            return PhaseResult.skipped("stop", f"Service {name} not found, nothing to stop", service=name)

        try:
            scm.stop_service(existing.name)
        except Exception as e:
            logger.warning("Failed to stop %s (continuing): %s", existing.name, e)
            return PhaseResult.failed("stop", f"Failed to stop {existing.name}", str(e), service=existing.name)

        logger.info("Stopped %s", existing.name)
        return PhaseResult.ok("stop", f"Stopped {existing.name}", service=existing.name)

    def _uninstall_phase(self) -> PhaseResult:
        try:
            run = self.installer.uninstall(self.request.executable_path)
        except InstallerError as e:
            logger.warning("Uninstall failed (service may not have been installed): %s", e)
            return PhaseResult.failed("uninstall", "Uninstall failed", str(e), output=e.output)
        return PhaseResult.ok("uninstall", "Previous registration removed", output=run.output)

    def _install_phase(self) -> PhaseResult:
        try:
            run = self.installer.install(self.request.executable_path)
        except InstallerError as e:
            logger.error("Install failed: %s", e)
            return PhaseResult.failed("install", "Install failed", str(e), output=e.output)
        return PhaseResult.ok("install", "Service installed", output=run.output)

    def _start_phase(self, scm, name: str) -> list[PhaseResult]:
        try:
            matches = match_services(scm.list_services(), name)
            if not matches:
                exact = scm.get_service(name)
                matches = [exact] if exact is not None else []
        except Exception as e:
            logger.warning("Could not query services: %s", e)
            return [PhaseResult.failed("start", "Could not query services", str(e))]

        if not matches:
            reason = (
                f"No service matching {name!r} was found. Check the name the installer "
                "registered (svcreinstall find <fragment>) and that the install succeeded."
            )
            logger.warning(reason)
            return [PhaseResult.failed("start", "No service to start", reason, service=name)]

        return [self._start_one(scm, match.name) for match in matches]

    def _start_one(self, scm, name: str) -> PhaseResult:
        try:
            scm.start_service(name)
            current = scm.get_service(name)
        except Exception as e:
            logger.warning("Failed to start %s: %s", name, e)
            return PhaseResult.failed("start", f"Failed to start {name}", str(e), service=name)

        status = current.status if current is not None else "missing"
        if status == SERVICE_RUNNING:
            logger.info("Service %s is running", name)
            return PhaseResult.ok("start", f"Started {name}", service=name)
        logger.warning("Service %s did not start (status: %s)", name, status)
        return PhaseResult.failed("start", f"Service {name} is not running", f"status is {status}", service=name)

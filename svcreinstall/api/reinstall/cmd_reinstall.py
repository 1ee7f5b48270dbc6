"""Reinstall command - stops, uninstalls, reinstalls and restarts a service."""

from collections.abc import Iterator
from pathlib import Path

from pydantic import ValidationError

from ...constants import DEFAULT_INSTALLER_DIR, DEFAULT_WAIT_TIME
from .._output_schemas.reinstall import ReinstallOutput
from ..StageResult import StageResult
from .InstallRequest import InstallRequest
from .ServiceReinstallOrchestrator import ServiceReinstallOrchestrator


def cmd_reinstall(
    service_path: Path,
    service_name: str | None = None,
    dotnet_path: Path = DEFAULT_INSTALLER_DIR,
    start_after_install: bool = True,
    wait_time: int = DEFAULT_WAIT_TIME,
) -> StageResult:
    """Reinstall a service from a rebuilt executable.

    Exit status is 0 unless a precondition fails or the installer fails to
    install the service; stop, uninstall and start problems only produce
    warnings.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        yield (0.0, "Building request...")
        try:
            request = InstallRequest(
                executable_path=service_path,
                service_name=service_name,
                installer_dir=dotnet_path,
                auto_start=start_after_install,
                wait_time=wait_time,
            )
        except ValidationError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error: invalid request: {e}"
            result_obj.output = ReinstallOutput(
                errors=[str(e)],
                warnings=[],
                service_path=str(service_path),
                service_name=service_name or "",
                name_guessed=not service_name,
                state="failed",
                exit_code=1,
                phases=[],
                started=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        orchestrator = ServiceReinstallOrchestrator(request)
        report = orchestrator.new_report()
        yield from orchestrator.steps(report)

        result_obj.result = report.summary()
        result_obj.output = report.to_output()
        result_obj.success = report.exit_code == 0

    return StageResult(
        announce=f"Reinstalling service from {service_path}...",
        progress_callback=do_work,
    )

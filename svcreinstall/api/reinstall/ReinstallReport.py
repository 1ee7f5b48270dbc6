"""Aggregated result of a reinstall run."""

from dataclasses import dataclass, field

from .._output_schemas.reinstall import ReinstallOutput
from .PhaseResult import Outcome, PhaseResult
from .RunState import RunState


@dataclass
class ReinstallReport:
    """Collects phase results and the final state of a run."""

    service_path: str
    service_name: str = ""
    name_guessed: bool = False
    auto_start: bool = True
    state: RunState = RunState.IDLE
    phases: list[PhaseResult] = field(default_factory=list)
    started: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def exit_code(self) -> int:
        return 1 if self.state is RunState.FAILED else 0

    def add(self, result: PhaseResult, fatal: bool = False) -> None:
        """Record a phase result; fatal failures move the run to FAILED."""
        self.phases.append(result)
        if result.is_failed:
            message = f"{result.message}: {result.reason}"
            if fatal:
                self.fail(message)
            else:
                self.warnings.append(message)
        elif result.phase == "start" and result.outcome is Outcome.OK and result.service:
            self.started.append(result.service)

    def fail(self, message: str) -> None:
        self.errors.append(message)
        self.state = RunState.FAILED

    def summary(self) -> str:
        if self.state is RunState.FAILED:
            return f"Reinstall failed: {self.errors[-1]}"
        if self.started:
            return f"Service reinstalled, started: {', '.join(self.started)}"
        if not self.auto_start:
            return f"Service {self.service_name} reinstalled (start skipped)"
        return f"Service {self.service_name} reinstalled, but no service was started"

    def to_output(self) -> dict:
        return ReinstallOutput(
            errors=list(self.errors),
            warnings=list(self.warnings),
            service_path=self.service_path,
            service_name=self.service_name,
            name_guessed=self.name_guessed,
            state=self.state.value,
            exit_code=self.exit_code,
            phases=[p.to_dict() for p in self.phases],
            started=list(self.started),
        ).model_dump(mode="python")

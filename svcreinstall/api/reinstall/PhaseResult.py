"""Typed outcome of a single reinstall phase."""

from dataclasses import dataclass
from enum import Enum


class Outcome(str, Enum):
    OK = "ok"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class PhaseResult:
    """Result of one phase (stop, uninstall, install or start).

    A failed phase is not necessarily fatal; the orchestrator decides.
    """

    phase: str
    outcome: Outcome
    message: str
    reason: str = ""
    output: str = ""
    service: str = ""

    @classmethod
    def ok(cls, phase: str, message: str, **kwargs) -> "PhaseResult":
        return cls(phase=phase, outcome=Outcome.OK, message=message, **kwargs)

    @classmethod
    def skipped(cls, phase: str, message: str, **kwargs) -> "PhaseResult":
        return cls(phase=phase, outcome=Outcome.SKIPPED, message=message, **kwargs)

    @classmethod
    def failed(cls, phase: str, message: str, reason: str, **kwargs) -> "PhaseResult":
        return cls(phase=phase, outcome=Outcome.FAILED, message=message, reason=reason, **kwargs)

    @property
    def is_failed(self) -> bool:
        return self.outcome is Outcome.FAILED

    def to_dict(self) -> dict[str, str]:
        return {
            "phase": self.phase,
            "outcome": self.outcome.value,
            "message": self.message,
            "reason": self.reason,
            "output": self.output,
            "service": self.service,
        }

"""Output schemas for reinstall commands."""

from pydantic import BaseModel, Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class PhaseOutput(BaseModel):
    """One phase of a reinstall run."""

    phase: str = Field(..., description="Phase name: stop, uninstall, install or start")
    outcome: str = Field(..., description="ok, skipped or failed")
    message: str = Field(..., description="Human readable summary")
    reason: str = Field(..., description="Failure reason, empty string unless outcome is failed")
    output: str = Field(..., description="Captured installer output, empty string if not applicable")
    service: str = Field(..., description="Service the phase acted on, empty string if not applicable")


class ReinstallOutput(BaseOutputSchema):
    """Output schema for reinstall command."""

    service_path: str = Field(..., description="Executable that was reinstalled")
    service_name: str = Field(..., description="Resolved service name used for SCM lookups")
    name_guessed: bool = Field(..., description="Whether the service name was derived from the executable filename")
    state: str = Field(..., description="Final state of the run (done or failed)")
    exit_code: int = Field(..., description="Process exit code")
    phases: list[PhaseOutput] = Field(..., description="Result of each phase in execution order")
    started: list[str] = Field(..., description="Names of services confirmed running after the start phase")


schema_registry.register_output_schema("reinstall", "reinstall", ReinstallOutput)

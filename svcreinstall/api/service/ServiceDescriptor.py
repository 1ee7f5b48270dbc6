"""Service descriptor DTO."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ServiceDescriptor:
    """A service as reported by the Service Control Manager."""

    name: str
    """Service (key) name registered with the SCM."""

    display_name: str
    """Friendly name shown in the services console."""

    status: str
    """Current status, e.g. 'running', 'stopped', 'start_pending'."""

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "display_name": self.display_name, "status": self.status}

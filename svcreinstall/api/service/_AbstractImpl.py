"""Abstract base class for Service Control Manager backends."""

from abc import ABC, abstractmethod

from .ServiceDescriptor import ServiceDescriptor


class _AbstractImpl(ABC):
    """Abstract base class for platform-specific service manager access.

    Services are keyed by their registered (key) name. Lookups by name return
    None for unknown services; control operations raise on failure.
    """

    @abstractmethod
    def list_services(self) -> list[ServiceDescriptor]:
        """Enumerate every service registered with the service manager."""
        pass

    @abstractmethod
    def get_service(self, name: str) -> ServiceDescriptor | None:
        """Look up a single service by its exact name.

        Returns:
            The service descriptor, or None if no service has that name
        """
        pass

    @abstractmethod
    def stop_service(self, name: str) -> None:
        """Stop a service, stopping any services that depend on it first."""
        pass

    @abstractmethod
    def start_service(self, name: str) -> None:
        """Request a service start."""
        pass

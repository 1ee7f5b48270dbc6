"""Service public API - access to the platform Service Control Manager."""

import platform
from pathlib import Path

from ._AbstractImpl import _AbstractImpl
from .ServiceDescriptor import ServiceDescriptor

# Registry: add new backends here (ONLY place backend types are enumerated)
_BACKEND_TYPES: tuple[str, ...] = ("windows",)


class Service:
    """Public API for service manager operations."""

    def __init__(self, backend_type: str | None = None):
        self.backend_type = backend_type
        self._impl: _AbstractImpl | None = None

    @staticmethod
    def detect_os() -> str:
        """Detect the current operating system and check if backend is supported.

        Returns:
            OS identifier string matching platform.system().lower() (e.g., "windows")

        Raises:
            RuntimeError: If OS backend directory does not exist
        """
        system = platform.system().lower()
        backend_dir = Path(__file__).parent / f"_{system}"
        if not backend_dir.exists():
            raise RuntimeError(f"Unsupported operating system: {system} (backend directory not found: {backend_dir})")
        return system

    def __enter__(self):
        backend_type = self.backend_type or self.detect_os()
        if backend_type not in _BACKEND_TYPES:
            raise ValueError(f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_TYPES)})")

        module = __import__(f"svcreinstall.api.service._{backend_type}._Impl", fromlist=[""])
        self._impl = module._Impl()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._impl = None
        return False

    def _require_impl(self) -> _AbstractImpl:
        if not self._impl:
            raise RuntimeError("Service not initialized. Use as context manager first.")
        return self._impl

    def list_services(self) -> list[ServiceDescriptor]:
        """Enumerate all registered services."""
        return self._require_impl().list_services()

    def get_service(self, name: str) -> ServiceDescriptor | None:
        """Look up a service by exact name, None if it does not exist."""
        return self._require_impl().get_service(name)

    def stop_service(self, name: str) -> None:
        """Stop a service and its dependents."""
        self._require_impl().stop_service(name)

    def start_service(self, name: str) -> None:
        """Start a service."""
        self._require_impl().start_service(name)

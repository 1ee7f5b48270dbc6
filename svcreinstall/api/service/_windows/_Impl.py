"""Windows service manager backend - psutil for queries, pywin32 for control."""

import psutil

from ....constants import START_TIMEOUT_SECONDS
from ....logging_config import get_logger
from .._AbstractImpl import _AbstractImpl
from ..ServiceDescriptor import ServiceDescriptor

logger = get_logger("service.windows")


class _Impl(_AbstractImpl):
    """Windows Service Control Manager access."""

    @staticmethod
    def _describe(svc) -> ServiceDescriptor:
        return ServiceDescriptor(name=svc.name(), display_name=svc.display_name(), status=svc.status())

    def list_services(self) -> list[ServiceDescriptor]:
        services = []
        for svc in psutil.win_service_iter():
            try:
                services.append(self._describe(svc))
            except (psutil.NoSuchProcess, psutil.AccessDenied) as e:
                # Deleted or unreadable between enumeration and query
                logger.debug("Skipping service %s: %s", svc.name(), e)
        return services

    def get_service(self, name: str) -> ServiceDescriptor | None:
        try:
            return self._describe(psutil.win_service_get(name))
        except psutil.NoSuchProcess:
            return None

    def stop_service(self, name: str) -> None:
        import win32serviceutil

        win32serviceutil.StopServiceWithDeps(name)

    def start_service(self, name: str) -> None:
        """Start a service and wait up to START_TIMEOUT_SECONDS for it to run.

        StartService returns while the service is still start_pending; the
        bounded wait lets the caller's status re-query see the settled state.
        A timeout is logged, not raised, so that re-query decides the outcome.
        """
        import pywintypes
        import win32service
        import win32serviceutil
        import winerror

        win32serviceutil.StartService(name)
        try:
            win32serviceutil.WaitForServiceStatus(name, win32service.SERVICE_RUNNING, START_TIMEOUT_SECONDS)
        except pywintypes.error as e:
            if e.winerror != winerror.ERROR_SERVICE_REQUEST_TIMEOUT:
                raise
            logger.warning("Service %s did not reach running state within %ss", name, START_TIMEOUT_SECONDS)

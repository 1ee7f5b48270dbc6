"""Service module - Service Control Manager queries and control."""

from .match_services import match_services
from .Service import Service
from .ServiceDescriptor import ServiceDescriptor

__all__ = [
    "Service",
    "ServiceDescriptor",
    "match_services",
]

"""Fuzzy service lookup by name fragment."""

from collections.abc import Iterable

from .ServiceDescriptor import ServiceDescriptor


def match_services(services: Iterable[ServiceDescriptor], hint: str) -> list[ServiceDescriptor]:
    """Return services whose name or display name contains hint (case-insensitive).

    Matching is a plain substring test, so a hint of 'Data' also selects an
    unrelated 'DataBase' service.
    """
    needle = hint.casefold()
    return [
        service
        for service in services
        if needle in service.name.casefold() or needle in service.display_name.casefold()
    ]

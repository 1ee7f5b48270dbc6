"""Utility helpers."""

from .get_package_version import get_package_version

__all__ = ["get_package_version"]

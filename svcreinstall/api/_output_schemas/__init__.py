"""Output schemas for all commands. Importing this package registers them."""

from . import reinstall, service, version  # noqa: F401

"""svcreinstall - stop, uninstall, reinstall and restart a Windows service."""

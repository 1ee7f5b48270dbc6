"""Check whether the current process holds administrator rights."""

import os


def _is_admin() -> bool:
    """Return True if running elevated on Windows; always False elsewhere."""
    if os.name != "nt":
        return False
    import ctypes

    try:
        return bool(ctypes.windll.shell32.IsUserAnAdmin())
    except (AttributeError, OSError):
        return False

"""Reinstall run states."""

from enum import Enum


class RunState(str, Enum):
    """Progress of a reinstall run.

    Runs move strictly forward through these states. Only VALIDATING and
    INSTALLING can end in FAILED.
    """

    IDLE = "idle"
    VALIDATING = "validating"
    STOPPING = "stopping"
    UNINSTALLING = "uninstalling"
    INSTALLING = "installing"
    AWAITING_REGISTRATION = "awaiting_registration"
    STARTING = "starting"
    DONE = "done"
    FAILED = "failed"

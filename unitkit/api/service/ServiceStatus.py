"""Service status reported by the service manager."""

from enum import Enum


class ServiceStatus(Enum):
    """Coarse state of an installed (or not installed) service."""

    RUNNING = "Running"
    STOPPED = "Stopped"
    UNKNOWN = "Unknown"
    NOT_INSTALLED = "Not installed"
    FAILED = "Failed"

    def __str__(self) -> str:
        return self.value

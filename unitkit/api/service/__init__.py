"""Service module - install and control units through systemctl."""

from .ServiceStatus import ServiceStatus
from .Systemd import Systemd

__all__ = [
    "ServiceStatus",
    "Systemd",
]

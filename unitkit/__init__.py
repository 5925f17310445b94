"""unitkit - generate systemd service units and drive systemctl."""

from .api.service.ServiceStatus import ServiceStatus
from .api.service.Systemd import Systemd
from .api.unit.ExecOptions import ExecOptions
from .api.unit.InstallSection import InstallSection
from .api.unit.ServiceSection import ServiceSection
from .api.unit.UnitFile import UnitFile
from .api.unit.UnitSection import UnitSection
from .api.UnitError import UnitCommandError, UnitError, UnitIOError, UnitValidationError

__all__ = [
    "ExecOptions",
    "InstallSection",
    "ServiceSection",
    "ServiceStatus",
    "Systemd",
    "UnitCommandError",
    "UnitError",
    "UnitFile",
    "UnitIOError",
    "UnitSection",
    "UnitValidationError",
]

"""Unit module - typed systemd unit file sections and their rendering."""

from .Action import Action
from .Architecture import Architecture
from .CollectMode import CollectMode
from .ExecOptions import ExecOptions
from .ExitType import ExitType
from .FileDescriptorStorePreserve import FileDescriptorStorePreserve
from .InstallSection import InstallSection
from .JobMode import JobMode
from .KillMode import KillMode
from .NotifyAccess import NotifyAccess
from .OOMPolicy import OOMPolicy
from .ProtectHome import ProtectHome
from .ProtectSystem import ProtectSystem
from .RestartMode import RestartMode
from .RestartPolicy import RestartPolicy
from .SecurityTech import SecurityTech
from .ServiceSection import ServiceSection
from .ServiceType import ServiceType
from .TimeoutFailureMode import TimeoutFailureMode
from .UnitFile import UnitFile
from .UnitSection import UnitSection
from .Virtualization import Virtualization

__all__ = [
    "Action",
    "Architecture",
    "CollectMode",
    "ExecOptions",
    "ExitType",
    "FileDescriptorStorePreserve",
    "InstallSection",
    "JobMode",
    "KillMode",
    "NotifyAccess",
    "OOMPolicy",
    "ProtectHome",
    "ProtectSystem",
    "RestartMode",
    "RestartPolicy",
    "SecurityTech",
    "ServiceSection",
    "ServiceType",
    "TimeoutFailureMode",
    "UnitFile",
    "UnitSection",
    "Virtualization",
]

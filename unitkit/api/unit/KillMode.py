"""How processes of the unit are killed (KillMode=)."""

from enum import Enum


class KillMode(str, Enum):
    CONTROL_GROUP = "control-group"
    MIXED = "mixed"
    PROCESS = "process"
    NONE = "none"

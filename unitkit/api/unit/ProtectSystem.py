"""Read-only mounting of system directories (ProtectSystem=)."""

from enum import Enum


class ProtectSystem(str, Enum):
    YES = "yes"
    NO = "no"
    FULL = "full"
    STRICT = "strict"

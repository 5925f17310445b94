"""When the manager considers the service finished (ExitType=)."""

from enum import Enum


class ExitType(str, Enum):
    MAIN = "main"
    CGROUP = "cgroup"

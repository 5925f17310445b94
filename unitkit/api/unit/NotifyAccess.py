"""Access to the notification socket (NotifyAccess=)."""

from enum import Enum


class NotifyAccess(str, Enum):
    NONE = "none"
    MAIN = "main"
    EXEC = "exec"
    ALL = "all"

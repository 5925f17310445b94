"""Action taken when a start/stop timeout is hit (Timeout*FailureMode=)."""

from enum import Enum


class TimeoutFailureMode(str, Enum):
    TERMINATE = "terminate"
    ABORT = "abort"
    KILL = "kill"

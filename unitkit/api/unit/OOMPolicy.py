"""Out-of-memory policy (OOMPolicy=)."""

from enum import Enum


class OOMPolicy(str, Enum):
    CONTINUE = "continue"
    STOP = "stop"
    KILL = "kill"

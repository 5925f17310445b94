"""Restart mode (RestartMode=)."""

from enum import Enum


class RestartMode(str, Enum):
    NORMAL = "normal"
    DIRECT = "direct"
    DEBUG = "debug"

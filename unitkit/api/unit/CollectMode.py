"""Unit garbage collection mode (CollectMode=)."""

from enum import Enum


class CollectMode(str, Enum):
    INACTIVE = "inactive"
    INACTIVE_OR_FAILED = "inactive-or-failed"

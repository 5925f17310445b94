"""Visibility of home directories (ProtectHome=)."""

from enum import Enum


class ProtectHome(str, Enum):
    YES = "yes"
    NO = "no"
    READ_ONLY = "read-only"
    TMPFS = "tmpfs"

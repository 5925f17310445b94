"""When the file descriptor store is released (FileDescriptorStorePreserve=)."""

from enum import Enum


class FileDescriptorStorePreserve(str, Enum):
    NO = "no"
    YES = "yes"
    RESTART = "restart"

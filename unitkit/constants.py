"""Shared constants for unit file locations and the control executable."""

SYSTEMCTL = "systemctl"  # control executable looked up on PATH

DEFAULT_UNIT_DIR = "/etc/systemd/system"

UNIT_FILE_SUFFIX = ".service"

# rw-r--r--
UNIT_FILE_MODE = 0o644

# Environment overrides
UNIT_DIR_ENV = "UNITKIT_UNIT_DIR"
SYSTEMCTL_ENV = "UNITKIT_SYSTEMCTL"

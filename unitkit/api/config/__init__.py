"""Runtime configuration lookups."""

from .get_systemctl import get_systemctl
from .get_unit_dir import get_unit_dir

__all__ = ["get_systemctl", "get_unit_dir"]

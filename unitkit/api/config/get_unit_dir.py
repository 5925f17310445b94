"""Get the directory unit files are installed into."""

import os
from pathlib import Path

from ...constants import DEFAULT_UNIT_DIR, UNIT_DIR_ENV


def get_unit_dir(*parts: str) -> Path:
    """Get the unit directory path or a path under it.

    Checks the UNITKIT_UNIT_DIR environment variable first, defaults to
    /etc/systemd/system if not set.

    Examples:
        >>> get_unit_dir()
        Path("/etc/systemd/system")
        >>> get_unit_dir("foo.service")
        Path("/etc/systemd/system/foo.service")
    """
    unit_dir_env = os.environ.get(UNIT_DIR_ENV)
    unit_dir = Path(unit_dir_env).expanduser() if unit_dir_env else Path(DEFAULT_UNIT_DIR)
    return unit_dir / Path(*parts) if parts else unit_dir

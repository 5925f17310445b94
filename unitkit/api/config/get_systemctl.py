"""Get the name (or path) of the control executable."""

import os

from ...constants import SYSTEMCTL, SYSTEMCTL_ENV


def get_systemctl() -> str:
    """Return UNITKIT_SYSTEMCTL if set, otherwise ``systemctl``."""
    return os.environ.get(SYSTEMCTL_ENV) or SYSTEMCTL

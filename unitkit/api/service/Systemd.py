"""systemd implementation - installs a unit file and drives systemctl."""

import shutil
import subprocess
from pathlib import Path

from ...constants import SYSTEMCTL, UNIT_FILE_MODE
from ...utils.logger import get_logger
from ..config.get_systemctl import get_systemctl
from ..config.get_unit_dir import get_unit_dir
from ..unit.UnitFile import UnitFile
from ..UnitError import UnitCommandError, UnitIOError, UnitValidationError
from ._AbstractImpl import _AbstractImpl
from .ServiceStatus import ServiceStatus

logger = get_logger("service")

# is-active tokens
_RUNNING_STATES = ("active", "activating")
_FAILED_STATE = "failed"
_INACTIVE_STATE = "inactive"


class Systemd(_AbstractImpl):
    """Service controller backed by the systemd ``systemctl`` tool.

    The unit file is written to ``<unit_dir>/<name>.service`` and every
    command addresses the unit by that file name.
    """

    def __init__(self, config: UnitFile, unit_dir: Path | None = None, systemctl: str | None = None):
        """Initialize the controller.

        Args:
            config: Unit file configuration to install and control.
            unit_dir: Directory unit files are written to. Defaults to get_unit_dir().
            systemctl: Control executable. Defaults to get_systemctl().
        """
        self.config = config
        self.unit_dir = Path(unit_dir) if unit_dir is not None else get_unit_dir()
        self.systemctl = systemctl or get_systemctl()

    @property
    def unit_name(self) -> str:
        return self.config.file_name

    @property
    def unit_path(self) -> Path:
        """Path the unit file is installed at."""
        return self.unit_dir / self.unit_name

    @staticmethod
    def is_available(systemctl: str = SYSTEMCTL) -> bool:
        """Whether the control executable can be found on PATH."""
        return shutil.which(systemctl) is not None

    def _run(self, *args: str) -> subprocess.CompletedProcess[str]:
        """Run ``systemctl <args>`` and return the completed process.

        Raises:
            UnitIOError: the executable could not be launched
            UnitCommandError: the executable exited non-zero
        """
        command = [self.systemctl, *args]
        logger.debug("Running %s", " ".join(command))
        try:
            result = subprocess.run(command, capture_output=True, text=True, errors="replace", check=False)
        except OSError as e:
            logger.error("Failed to launch %s: %s", self.systemctl, e)
            raise UnitIOError(f"Failed to run {' '.join(command)}", os_error=e) from e

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            message = stderr or f"{' '.join(command)} exited with status {result.returncode}"
            logger.error("%s failed (%d): %s", " ".join(command), result.returncode, message)
            raise UnitCommandError(message, command=command, returncode=result.returncode, stderr=stderr)
        return result

    def install(self) -> None:
        """Write the unit file, enable the unit and reload the systemd manager.

        Raises:
            UnitValidationError: the unit file already exists
            UnitIOError: the unit file could not be written
            UnitCommandError: enable or daemon-reload failed
        """
        unit_path = self.unit_path
        if unit_path.exists():
            raise UnitValidationError(
                f"Unit file already exists at {unit_path}", field="unit_path", value=str(unit_path)
            )

        logger.info("Installing %s at %s", self.unit_name, unit_path)
        try:
            unit_path.write_text(self.config.render(), encoding="utf-8")
            unit_path.chmod(UNIT_FILE_MODE)
        except OSError as e:
            logger.error("Failed to write unit file %s: %s", unit_path, e)
            raise UnitIOError(f"Failed to write unit file {unit_path}", os_error=e) from e

        self._run("enable", self.unit_name)
        self._run("daemon-reload")

    def uninstall(self) -> None:
        """Disable the unit, then delete its unit file.

        Raises:
            UnitCommandError: disable failed
            UnitIOError: the unit file could not be removed
        """
        logger.info("Uninstalling %s", self.unit_name)
        self._run("disable", self.unit_name)
        try:
            self.unit_path.unlink()
        except OSError as e:
            logger.error("Failed to remove unit file %s: %s", self.unit_path, e)
            raise UnitIOError(f"Failed to remove unit file {self.unit_path}", os_error=e) from e

    def start(self) -> None:
        logger.info("Starting %s", self.unit_name)
        self._run("start", self.unit_name)

    def stop(self) -> None:
        logger.info("Stopping %s", self.unit_name)
        self._run("stop", self.unit_name)

    def restart(self) -> None:
        logger.info("Restarting %s", self.unit_name)
        self._run("restart", self.unit_name)

    def status(self) -> ServiceStatus:
        """Map ``systemctl is-active`` output onto a ServiceStatus.

        An inactive unit is reported as STOPPED when systemd knows its unit
        file and NOT_INSTALLED otherwise. Unrecognised states also map to
        NOT_INSTALLED.

        Raises:
            UnitCommandError: either query exited non-zero
        """
        state = self._run("is-active", self.unit_name).stdout.strip()
        logger.debug("%s is-active: %r", self.unit_name, state)

        if state in _RUNNING_STATES:
            return ServiceStatus.RUNNING
        if state == _FAILED_STATE:
            return ServiceStatus.FAILED
        if state == _INACTIVE_STATE:
            listing = self._run("list-unit-files", "-t", "service", self.unit_name).stdout
            if self.unit_name in listing:
                return ServiceStatus.STOPPED
            return ServiceStatus.NOT_INSTALLED
        return ServiceStatus.NOT_INSTALLED

"""Error family raised by unit generation and service control."""

from typing import Any


class UnitError(Exception):
    """Base class for every failure surfaced by unitkit.

    ``kind`` discriminates the three failure families: ``"io"``,
    ``"validation"`` and ``"command"``.
    """

    kind: str = "unit"
    prefix: str = "Error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"{self.prefix}: {message}")


class UnitIOError(UnitError):
    """File create/write/permission/delete failure, or the executable could not be launched."""

    kind = "io"
    prefix = "I/O Error"

    def __init__(self, message: str, os_error: OSError | None = None):
        self.os_error = os_error
        if os_error is not None:
            message = f"{message}: {os_error}"
        super().__init__(message)


class UnitValidationError(UnitError):
    """A field value violates a documented constraint, or a precondition does not hold."""

    kind = "validation"
    prefix = "Validation Error"

    def __init__(self, message: str, field: str | None = None, value: Any = None):
        self.field = field
        self.value = value
        super().__init__(message)


class UnitCommandError(UnitError):
    """The control executable exited with a non-zero status."""

    kind = "command"
    prefix = "Command Error"

    def __init__(self, message: str, command: list[str] | None = None, returncode: int | None = None, stderr: str = ""):
        self.command = command or []
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)

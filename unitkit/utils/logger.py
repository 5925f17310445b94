import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: int = logging.WARNING, log_file: Path | None = None) -> None:
    """Configure unified unitkit logging.

    Args:
        level: Level applied to the ``unitkit`` logger.
        log_file: Optional rotating log file. When None, records go to STDERR.
    """
    global _CONFIGURED
    root_logger = logging.getLogger("unitkit")
    root_logger.setLevel(level)
    if _CONFIGURED:
        return

    formatter = logging.Formatter(_FORMAT)

    handler: logging.Handler
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,  # 5MB * 3
        )
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module."""
    return logging.getLogger(f"unitkit.{name}")

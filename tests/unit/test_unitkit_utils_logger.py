"""Unit tests for unitkit.utils.logger."""

import logging

from unitkit.utils.logger import configure_logging, get_logger


def test_get_logger_is_namespaced():
    assert get_logger("cli").name == "unitkit.cli"


def test_configure_logging_to_file(fresh_logging, tmp_path):
    log_file = tmp_path / "logs" / "unitkit.log"
    configure_logging(logging.DEBUG, log_file=log_file)

    get_logger("service").debug("Running systemctl start foo.service")
    for handler in fresh_logging.handlers:
        handler.flush()

    content = log_file.read_text(encoding="utf-8")
    assert "unitkit.service - DEBUG - Running systemctl start foo.service" in content


def test_configure_logging_only_adds_one_handler(fresh_logging):
    before = len(fresh_logging.handlers)
    configure_logging(logging.INFO)
    configure_logging(logging.DEBUG)
    assert len(fresh_logging.handlers) == before + 1
    assert fresh_logging.level == logging.DEBUG

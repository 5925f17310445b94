"""Shared pytest configuration and fixtures for all tests."""

import json
import logging
import subprocess
from pathlib import Path

import pytest

from unitkit.api.unit.ExecOptions import ExecOptions
from unitkit.api.unit.InstallSection import InstallSection
from unitkit.api.unit.ServiceSection import ServiceSection
from unitkit.api.unit.UnitFile import UnitFile
from unitkit.api.unit.UnitSection import UnitSection


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with no external processes")
    config.addinivalue_line("markers", "integration: tests that touch the real service manager")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Configuration Helpers
# =============================================================================


@pytest.fixture
def config_dict() -> dict:
    """A small but realistic unit configuration, as it would appear in JSON."""
    return {
        "name": "foo",
        "unit": {
            "description": "Foo daemon",
            "documentation": ["https://example.com/foo", "man:foo(8)"],
            "after": ["network.target"],
        },
        "service": {
            "service_type": "simple",
            "exec_start": ["/usr/bin/foo --serve"],
            "restart": "on-failure",
            "restart_sec": 5,
            "execution": {
                "user": "foo",
                "environment": ["FOO=bar", "DEBUG=1"],
                "nice": 5,
            },
        },
        "install": {"wanted_by": ["multi-user.target"]},
    }


@pytest.fixture
def unit_file() -> UnitFile:
    """The configuration of config_dict built in code."""
    return UnitFile(
        name="foo",
        unit=UnitSection(
            description="Foo daemon",
            documentation=["https://example.com/foo", "man:foo(8)"],
            after=["network.target"],
        ),
        service=ServiceSection(
            service_type="simple",
            exec_start=["/usr/bin/foo --serve"],
            restart="on-failure",
            restart_sec=5,
            execution=ExecOptions(user="foo", environment=["FOO=bar", "DEBUG=1"], nice=5),
        ),
        install=InstallSection(wanted_by=["multi-user.target"]),
    )


@pytest.fixture
def config_file(tmp_path, config_dict) -> Path:
    """config_dict written to a JSON file."""
    path = tmp_path / "foo.json"
    path.write_text(json.dumps(config_dict), encoding="utf-8")
    return path


class FakeSystemctl:
    """Stand-in for subprocess.run that records commands and replays canned results.

    ``responses`` maps a subcommand (``"is-active"``, ``"enable"``, ...) to
    ``(returncode, stdout, stderr)``. Unlisted subcommands succeed silently.
    """

    def __init__(self):
        self.calls: list[list[str]] = []
        self.responses: dict[str, tuple[int, str, str]] = {}

    def __call__(self, command, **kwargs):
        self.calls.append(list(command))
        returncode, stdout, stderr = self.responses.get(command[1], (0, "", ""))
        return subprocess.CompletedProcess(command, returncode, stdout=stdout, stderr=stderr)

    @property
    def subcommands(self) -> list[str]:
        return [call[1] for call in self.calls]


@pytest.fixture
def fake_systemctl(monkeypatch) -> FakeSystemctl:
    """Patch subprocess.run with a FakeSystemctl."""
    fake = FakeSystemctl()
    monkeypatch.setattr(subprocess, "run", fake)
    return fake


@pytest.fixture
def unit_dir(tmp_path) -> Path:
    path = tmp_path / "system"
    path.mkdir()
    return path


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch):
    """Tests never see the caller's unit directory or systemctl overrides."""
    monkeypatch.delenv("UNITKIT_UNIT_DIR", raising=False)
    monkeypatch.delenv("UNITKIT_SYSTEMCTL", raising=False)


@pytest.fixture
def fresh_logging(monkeypatch):
    """Let configure_logging run again; restore the unitkit logger afterwards."""
    from unitkit.utils import logger as logger_module

    root = logging.getLogger("unitkit")
    handlers, level = list(root.handlers), root.level
    monkeypatch.setattr(logger_module, "_CONFIGURED", False)
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)

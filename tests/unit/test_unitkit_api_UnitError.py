"""Unit tests for unitkit.api.UnitError."""

import pytest

from unitkit.api.UnitError import UnitCommandError, UnitError, UnitIOError, UnitValidationError


def test_kinds_and_prefixes():
    assert UnitIOError("x").kind == "io"
    assert UnitValidationError("x").kind == "validation"
    assert UnitCommandError("x").kind == "command"

    assert str(UnitIOError("x")) == "I/O Error: x"
    assert str(UnitValidationError("x")) == "Validation Error: x"
    assert str(UnitCommandError("x")) == "Command Error: x"


@pytest.mark.parametrize("cls", [UnitIOError, UnitValidationError, UnitCommandError])
def test_single_catchable_family(cls):
    with pytest.raises(UnitError):
        raise cls("boom")


def test_io_error_includes_os_error():
    os_error = PermissionError(13, "Permission denied")
    err = UnitIOError("Failed to write unit file /etc/systemd/system/foo.service", os_error=os_error)
    assert err.os_error is os_error
    assert err.message.endswith("Permission denied")


def test_validation_error_carries_field_and_value():
    err = UnitValidationError("bad nice", field="nice", value=25)
    assert (err.field, err.value, err.message) == ("nice", 25, "bad nice")


def test_command_error_carries_process_details():
    err = UnitCommandError("denied", command=["systemctl", "start", "foo.service"], returncode=4, stderr="denied")
    assert err.command == ["systemctl", "start", "foo.service"]
    assert err.returncode == 4
    assert err.stderr == "denied"

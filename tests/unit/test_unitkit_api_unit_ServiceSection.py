"""Unit tests for unitkit.api.unit.ServiceSection."""

import pytest

from unitkit.api.unit.ExecOptions import ExecOptions
from unitkit.api.unit.RestartPolicy import RestartPolicy
from unitkit.api.unit.ServiceSection import ServiceSection
from unitkit.api.unit.ServiceType import ServiceType
from unitkit.api.UnitError import UnitValidationError


def test_default_renders_header_only():
    assert str(ServiceSection()) == "[Service]\n"


def test_exec_commands_one_per_line():
    section = ServiceSection(
        exec_start_pre=["/bin/mkdir -p /run/foo", "/bin/chown foo /run/foo"],
        exec_start=["/usr/bin/foo"],
    )
    assert section.render() == [
        "[Service]",
        "ExecStartPre=/bin/mkdir -p /run/foo",
        "ExecStartPre=/bin/chown foo /run/foo",
        "ExecStart=/usr/bin/foo",
    ]


def test_core_fields_render_in_order():
    section = ServiceSection(
        restart_sec=10,
        restart=RestartPolicy.ALWAYS,
        exec_start=["/usr/bin/foo"],
        service_type=ServiceType.NOTIFY_RELOAD,
        remain_after_exit=False,
        success_exit_status=["0", "SIGTERM"],
    )
    assert section.lines() == [
        "Type=notify-reload",
        "RemainAfterExit=no",
        "ExecStart=/usr/bin/foo",
        "Restart=always",
        "RestartSec=10",
        "SuccessExitStatus=0 SIGTERM",
    ]


def test_execution_lines_follow_service_lines():
    section = ServiceSection(
        execution=ExecOptions(user="foo"),
        restart=RestartPolicy.ON_FAILURE,
    )
    assert section.lines() == ["Restart=on-failure", "User=foo"]


def test_string_tokens_coerced_to_enums():
    section = ServiceSection(service_type="oneshot", restart="on-abnormal")
    assert section.service_type is ServiceType.ONESHOT
    assert section.restart is RestartPolicy.ON_ABNORMAL


def test_negative_restart_sec_rejected():
    with pytest.raises(ValueError):
        ServiceSection(restart_sec=-1)


def test_validate_delegates_to_execution():
    ServiceSection().validate()
    ServiceSection(execution=ExecOptions(nice=19)).validate()
    with pytest.raises(UnitValidationError) as exc_info:
        ServiceSection(execution=ExecOptions(nice=25)).validate()
    assert exc_info.value.field == "nice"


def test_set_builds_execution_from_mapping():
    section = ServiceSection().set(execution={"user": "foo"})
    assert section.execution == ExecOptions(user="foo")


def test_set_rejects_bad_enum():
    with pytest.raises(UnitValidationError) as exc_info:
        ServiceSection().set(restart="sometimes")
    assert exc_info.value.field == "restart"

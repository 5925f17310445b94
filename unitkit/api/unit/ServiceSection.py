"""[Service] section: process start-up, restart and timeout policy.

https://www.freedesktop.org/software/systemd/man/latest/systemd.service.html#Options
"""

from pathlib import Path
from typing import ClassVar

from pydantic import Field

from ._format_fields import _format_bool, _format_each, _format_joined, _format_scalar
from ._Options import _FieldSpec, _Section
from .ExecOptions import ExecOptions
from .ExitType import ExitType
from .FileDescriptorStorePreserve import FileDescriptorStorePreserve
from .NotifyAccess import NotifyAccess
from .OOMPolicy import OOMPolicy
from .RestartMode import RestartMode
from .RestartPolicy import RestartPolicy
from .ServiceType import ServiceType
from .TimeoutFailureMode import TimeoutFailureMode


class ServiceSection(_Section):
    """Options of the [Service] section.

    ``execution`` holds the execution environment (systemd.exec options); its
    lines are written at the end of the block.
    """

    HEADER: ClassVar[str] = "Service"

    service_type: ServiceType | None = Field(None, description="How start-up completion is signalled (Type=)")
    exit_type: ExitType | None = None
    remain_after_exit: bool | None = Field(None, description="Stay active after all processes exited")
    guess_main_pid: bool | None = None
    pid_file: Path | None = None
    bus_name: str | None = None

    # Commands, written one per line
    exec_condition: list[str] | None = None
    exec_start_pre: list[str] | None = None
    exec_start: list[str] | None = None
    exec_start_post: list[str] | None = None
    exec_reload: list[str] | None = None
    exec_stop: list[str] | None = None
    exec_stop_post: list[str] | None = None

    # Restart policy
    restart: RestartPolicy | None = None
    restart_mode: RestartMode | None = None
    restart_sec: int | None = Field(None, ge=0, description="Seconds to sleep before restarting")
    restart_steps: int | None = Field(None, ge=0)
    restart_max_delay_sec: str | None = None
    success_exit_status: list[str] | None = None
    restart_prevent_exit_status: list[str] | None = None
    restart_force_exit_status: list[str] | None = None

    # Timeouts
    timeout_start_sec: str | None = None
    timeout_stop_sec: str | None = None
    timeout_abort_sec: str | None = None
    timeout_sec: str | None = None
    timeout_start_failure_mode: TimeoutFailureMode | None = None
    timeout_stop_failure_mode: TimeoutFailureMode | None = None

    # Runtime caps
    runtime_max_sec: str | None = None
    runtime_randomized_extra_sec: str | None = None
    watchdog_sec: str | None = None

    root_directory_start_only: bool | None = None
    non_blocking: bool | None = None
    notify_access: NotifyAccess | None = None

    # Sockets and file descriptor store
    sockets: list[str] | None = None
    file_descriptor_store_max: int | None = Field(None, ge=0)
    file_descriptor_store_preserve: FileDescriptorStorePreserve | None = None
    usb_function_descriptors: Path | None = None
    usb_function_strings: Path | None = None

    oom_policy: OOMPolicy | None = None
    open_file: list[str] | None = None
    reload_signal: str | None = None

    execution: ExecOptions | None = Field(None, description="Execution environment (systemd.exec)")

    KEYS: ClassVar[tuple[_FieldSpec, ...]] = (
        ("service_type", "Type", _format_scalar),
        ("exit_type", "ExitType", _format_scalar),
        ("remain_after_exit", "RemainAfterExit", _format_bool),
        ("guess_main_pid", "GuessMainPID", _format_bool),
        ("pid_file", "PIDFile", _format_scalar),
        ("bus_name", "BusName", _format_scalar),
        ("exec_condition", "ExecCondition", _format_each),
        ("exec_start_pre", "ExecStartPre", _format_each),
        ("exec_start", "ExecStart", _format_each),
        ("exec_start_post", "ExecStartPost", _format_each),
        ("exec_reload", "ExecReload", _format_each),
        ("exec_stop", "ExecStop", _format_each),
        ("exec_stop_post", "ExecStopPost", _format_each),
        ("restart", "Restart", _format_scalar),
        ("restart_mode", "RestartMode", _format_scalar),
        ("restart_sec", "RestartSec", _format_scalar),
        ("restart_steps", "RestartSteps", _format_scalar),
        ("restart_max_delay_sec", "RestartMaxDelaySec", _format_scalar),
        ("success_exit_status", "SuccessExitStatus", _format_joined),
        ("restart_prevent_exit_status", "RestartPreventExitStatus", _format_joined),
        ("restart_force_exit_status", "RestartForceExitStatus", _format_joined),
        ("timeout_start_sec", "TimeoutStartSec", _format_scalar),
        ("timeout_stop_sec", "TimeoutStopSec", _format_scalar),
        ("timeout_abort_sec", "TimeoutAbortSec", _format_scalar),
        ("timeout_sec", "TimeoutSec", _format_scalar),
        ("timeout_start_failure_mode", "TimeoutStartFailureMode", _format_scalar),
        ("timeout_stop_failure_mode", "TimeoutStopFailureMode", _format_scalar),
        ("runtime_max_sec", "RuntimeMaxSec", _format_scalar),
        ("runtime_randomized_extra_sec", "RuntimeRandomizedExtraSec", _format_scalar),
        ("watchdog_sec", "WatchdogSec", _format_scalar),
        ("root_directory_start_only", "RootDirectoryStartOnly", _format_bool),
        ("non_blocking", "NonBlocking", _format_bool),
        ("notify_access", "NotifyAccess", _format_scalar),
        ("sockets", "Sockets", _format_joined),
        ("file_descriptor_store_max", "FileDescriptorStoreMax", _format_scalar),
        ("file_descriptor_store_preserve", "FileDescriptorStorePreserve", _format_scalar),
        ("usb_function_descriptors", "USBFunctionDescriptors", _format_scalar),
        ("usb_function_strings", "USBFunctionStrings", _format_scalar),
        ("oom_policy", "OOMPolicy", _format_scalar),
        ("open_file", "OpenFile", _format_each),
        ("reload_signal", "ReloadSignal", _format_scalar),
    )

    def lines(self) -> list[str]:
        out = super().lines()
        if self.execution is not None:
            out.extend(self.execution.lines())
        return out

    def validate(self) -> None:  # type: ignore[override]
        if self.execution is not None:
            self.execution.validate()

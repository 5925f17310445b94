"""[Unit] section: generic information about the unit.

https://www.freedesktop.org/software/systemd/man/latest/systemd.unit.html#%5BUnit%5D%20Section%20Options
"""

from pathlib import Path
from typing import ClassVar

from pydantic import Field

from ..UnitError import UnitValidationError
from ._format_fields import _format_bool, _format_joined, _format_scalar
from ._Options import _FieldSpec, _Section
from .Action import Action
from .Architecture import Architecture
from .CollectMode import CollectMode
from .JobMode import JobMode
from .SecurityTech import SecurityTech
from .Virtualization import Virtualization

DOCUMENTATION_SCHEMES = ("http://", "https://", "file:", "info:", "man:")
CAPABILITY_PREFIX = "CAP_"

# Condition*= and Assert*= share one shape; only systemd's reaction differs
# (skip the unit vs. fail it).
_PROBES: tuple[_FieldSpec, ...] = (
    ("architecture", "Architecture", _format_scalar),
    ("firmware", "Firmware", _format_scalar),
    ("virtualization", "Virtualization", _format_scalar),
    ("host", "Host", _format_scalar),
    ("kernel_command_line", "KernelCommandLine", _format_scalar),
    ("kernel_version", "KernelVersion", _format_scalar),
    ("credential", "Credential", _format_scalar),
    ("environment", "Environment", _format_scalar),
    ("security", "Security", _format_joined),
    ("capability", "Capability", _format_joined),
    ("ac_power", "ACPower", _format_bool),
    ("needs_update", "NeedsUpdate", _format_scalar),
    ("first_boot", "FirstBoot", _format_bool),
    ("path_exists", "PathExists", _format_scalar),
    ("path_exists_glob", "PathExistsGlob", _format_scalar),
    ("path_is_directory", "PathIsDirectory", _format_scalar),
    ("path_is_symbolic_link", "PathIsSymbolicLink", _format_scalar),
    ("path_is_mount_point", "PathIsMountPoint", _format_scalar),
    ("path_is_read_write", "PathIsReadWrite", _format_scalar),
    ("path_is_encrypted", "PathIsEncrypted", _format_scalar),
    ("directory_not_empty", "DirectoryNotEmpty", _format_scalar),
    ("file_not_empty", "FileNotEmpty", _format_scalar),
    ("file_is_executable", "FileIsExecutable", _format_scalar),
    ("user", "User", _format_scalar),
    ("group", "Group", _format_scalar),
    ("control_group_controller", "ControlGroupController", _format_joined),
    ("memory", "Memory", _format_scalar),
    ("cpus", "CPUs", _format_scalar),
    ("cpu_feature", "CPUFeature", _format_joined),
    ("os_release", "OSRelease", _format_scalar),
    ("memory_pressure", "MemoryPressure", _format_scalar),
    ("cpu_pressure", "CPUPressure", _format_scalar),
    ("io_pressure", "IOPressure", _format_scalar),
)


class UnitSection(_Section):
    """Options of the [Unit] section."""

    HEADER: ClassVar[str] = "Unit"

    description: str | None = Field(None, description="Short human readable title of the unit")
    documentation: list[str] | None = Field(None, description="URIs referencing documentation for this unit")

    # Dependencies
    wants: list[str] | None = Field(None, description="Weak requirement dependencies")
    requires: list[str] | None = Field(None, description="Requirement dependencies")
    requisite: list[str] | None = Field(None, description="Units that must already be active")
    binds_to: list[str] | None = Field(None, description="Like Requires=, but stops with the listed units")
    part_of: list[str] | None = Field(None, description="Units whose stop/restart propagates to this one")
    upholds: list[str] | None = Field(None, description="Units kept running while this one is active")
    conflicts: list[str] | None = Field(None, description="Negative requirement dependencies")

    # Ordering
    before: list[str] | None = Field(None, description="Units started after this one")
    after: list[str] | None = Field(None, description="Units started before this one")

    # Lifecycle triggers
    on_failure: list[str] | None = Field(None, description="Units activated when this unit fails")
    on_success: list[str] | None = Field(None, description="Units activated when this unit succeeds")
    propagates_reload_to: list[str] | None = None
    reload_propagated_from: list[str] | None = None
    propagates_stop_to: list[str] | None = None
    stop_propagated_from: list[str] | None = None

    # Namespaces and mounts
    joins_namespace_of: list[str] | None = None
    requires_mounts_for: list[str] | None = None
    wants_mounts_for: list[str] | None = None

    on_success_job_mode: JobMode | None = None
    on_failure_job_mode: JobMode | None = None

    # Behavioural flags
    ignore_on_isolate: bool | None = None
    stop_when_unneeded: bool | None = None
    refuse_manual_start: bool | None = None
    refuse_manual_stop: bool | None = None
    allow_isolate: bool | None = None
    default_dependencies: bool | None = None
    survive_final_kill_signal: bool | None = None

    collect_mode: CollectMode | None = None
    failure_action: Action | None = None
    success_action: Action | None = None
    failure_action_exit_status: int | None = Field(None, ge=0, le=255)
    success_action_exit_status: int | None = Field(None, ge=0, le=255)

    # Job timeouts and start rate limiting
    job_timeout_sec: int | None = Field(None, ge=0, description="Seconds a queued job may wait")
    job_running_timeout_sec: int | None = Field(None, ge=0, description="Seconds a running job may take")
    job_timeout_action: Action | None = None
    job_timeout_reboot_argument: str | None = None
    start_limit_interval_sec: int | None = Field(None, ge=0)
    start_limit_burst: int | None = Field(None, ge=0)
    start_limit_action: Action | None = None
    reboot_argument: str | None = None

    source_path: Path | None = Field(None, description="Configuration file this unit was generated from")

    # Conditions: unmet conditions skip the unit
    condition_architecture: Architecture | None = None
    condition_firmware: str | None = None
    condition_virtualization: Virtualization | None = None
    condition_host: str | None = None
    condition_kernel_command_line: str | None = None
    condition_kernel_version: str | None = None
    condition_credential: str | None = None
    condition_environment: str | None = None
    condition_security: list[SecurityTech] | None = None
    condition_capability: list[str] | None = None
    condition_ac_power: bool | None = None
    condition_needs_update: str | None = None
    condition_first_boot: bool | None = None
    condition_path_exists: str | None = None
    condition_path_exists_glob: str | None = None
    condition_path_is_directory: str | None = None
    condition_path_is_symbolic_link: str | None = None
    condition_path_is_mount_point: str | None = None
    condition_path_is_read_write: str | None = None
    condition_path_is_encrypted: str | None = None
    condition_directory_not_empty: str | None = None
    condition_file_not_empty: str | None = None
    condition_file_is_executable: str | None = None
    condition_user: str | None = None
    condition_group: str | None = None
    condition_control_group_controller: list[str] | None = None
    condition_memory: str | None = None
    condition_cpus: str | None = None
    condition_cpu_feature: list[str] | None = None
    condition_os_release: str | None = None
    condition_memory_pressure: str | None = None
    condition_cpu_pressure: str | None = None
    condition_io_pressure: str | None = None

    # Assertions: unmet assertions fail the unit
    assert_architecture: Architecture | None = None
    assert_firmware: str | None = None
    assert_virtualization: Virtualization | None = None
    assert_host: str | None = None
    assert_kernel_command_line: str | None = None
    assert_kernel_version: str | None = None
    assert_credential: str | None = None
    assert_environment: str | None = None
    assert_security: list[SecurityTech] | None = None
    assert_capability: list[str] | None = None
    assert_ac_power: bool | None = None
    assert_needs_update: str | None = None
    assert_first_boot: bool | None = None
    assert_path_exists: str | None = None
    assert_path_exists_glob: str | None = None
    assert_path_is_directory: str | None = None
    assert_path_is_symbolic_link: str | None = None
    assert_path_is_mount_point: str | None = None
    assert_path_is_read_write: str | None = None
    assert_path_is_encrypted: str | None = None
    assert_directory_not_empty: str | None = None
    assert_file_not_empty: str | None = None
    assert_file_is_executable: str | None = None
    assert_user: str | None = None
    assert_group: str | None = None
    assert_control_group_controller: list[str] | None = None
    assert_memory: str | None = None
    assert_cpus: str | None = None
    assert_cpu_feature: list[str] | None = None
    assert_os_release: str | None = None
    assert_memory_pressure: str | None = None
    assert_cpu_pressure: str | None = None
    assert_io_pressure: str | None = None

    KEYS: ClassVar[tuple[_FieldSpec, ...]] = (
        ("description", "Description", _format_scalar),
        ("documentation", "Documentation", _format_joined),
        ("wants", "Wants", _format_joined),
        ("requires", "Requires", _format_joined),
        ("requisite", "Requisite", _format_joined),
        ("binds_to", "BindsTo", _format_joined),
        ("part_of", "PartOf", _format_joined),
        ("upholds", "Upholds", _format_joined),
        ("conflicts", "Conflicts", _format_joined),
        ("before", "Before", _format_joined),
        ("after", "After", _format_joined),
        ("on_failure", "OnFailure", _format_joined),
        ("on_success", "OnSuccess", _format_joined),
        ("propagates_reload_to", "PropagatesReloadTo", _format_joined),
        ("reload_propagated_from", "ReloadPropagatedFrom", _format_joined),
        ("propagates_stop_to", "PropagatesStopTo", _format_joined),
        ("stop_propagated_from", "StopPropagatedFrom", _format_joined),
        ("joins_namespace_of", "JoinsNamespaceOf", _format_joined),
        ("requires_mounts_for", "RequiresMountsFor", _format_joined),
        ("wants_mounts_for", "WantsMountsFor", _format_joined),
        ("on_success_job_mode", "OnSuccessJobMode", _format_scalar),
        ("on_failure_job_mode", "OnFailureJobMode", _format_scalar),
        ("ignore_on_isolate", "IgnoreOnIsolate", _format_bool),
        ("stop_when_unneeded", "StopWhenUnneeded", _format_bool),
        ("refuse_manual_start", "RefuseManualStart", _format_bool),
        ("refuse_manual_stop", "RefuseManualStop", _format_bool),
        ("allow_isolate", "AllowIsolate", _format_bool),
        ("default_dependencies", "DefaultDependencies", _format_bool),
        ("survive_final_kill_signal", "SurviveFinalKillSignal", _format_bool),
        ("collect_mode", "CollectMode", _format_scalar),
        ("failure_action", "FailureAction", _format_scalar),
        ("success_action", "SuccessAction", _format_scalar),
        ("failure_action_exit_status", "FailureActionExitStatus", _format_scalar),
        ("success_action_exit_status", "SuccessActionExitStatus", _format_scalar),
        ("job_timeout_sec", "JobTimeoutSec", _format_scalar),
        ("job_running_timeout_sec", "JobRunningTimeoutSec", _format_scalar),
        ("job_timeout_action", "JobTimeoutAction", _format_scalar),
        ("job_timeout_reboot_argument", "JobTimeoutRebootArgument", _format_scalar),
        ("start_limit_interval_sec", "StartLimitIntervalSec", _format_scalar),
        ("start_limit_burst", "StartLimitBurst", _format_scalar),
        ("start_limit_action", "StartLimitAction", _format_scalar),
        ("reboot_argument", "RebootArgument", _format_scalar),
        ("source_path", "SourcePath", _format_scalar),
        *((f"condition_{name}", f"Condition{key}", fmt) for name, key, fmt in _PROBES),
        *((f"assert_{name}", f"Assert{key}", fmt) for name, key, fmt in _PROBES),
    )

    def validate(self) -> None:  # type: ignore[override]
        """Check documentation URIs and capability names.

        Raises:
            UnitValidationError: on the first offending value
        """
        for doc in self.documentation or []:
            if not doc.startswith(DOCUMENTATION_SCHEMES):
                raise UnitValidationError(
                    f"Invalid documentation URI {doc!r}: must start with http://, https://, file:, info:, or man:",
                    field="documentation",
                    value=doc,
                )

        for field, key in (
            ("condition_capability", "ConditionCapability"),
            ("assert_capability", "AssertCapability"),
        ):
            for cap in getattr(self, field) or []:
                if not cap.startswith(CAPABILITY_PREFIX):
                    raise UnitValidationError(
                        f"Invalid {key} {cap!r}: must start with {CAPABILITY_PREFIX}",
                        field=field,
                        value=cap,
                    )

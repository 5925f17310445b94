"""Execution environment options embedded in the [Service] section.

https://www.freedesktop.org/software/systemd/man/latest/systemd.exec.html#Options
"""

import re
from pathlib import Path
from typing import ClassVar

from pydantic import Field

from ..UnitError import UnitValidationError
from ._format_fields import _format_bool, _format_each, _format_joined, _format_scalar
from ._Options import _FieldSpec, _Options
from .KillMode import KillMode
from .ProtectHome import ProtectHome
from .ProtectSystem import ProtectSystem

NICE_RANGE = (-20, 19)
OOM_SCORE_ADJUST_RANGE = (-1000, 1000)
CAPABILITY_PREFIX = "CAP_"

_UMASK_RE = re.compile(r"[0-7]{3,4}")


class ExecOptions(_Options):
    """Process execution environment: paths, identity, environment, limits and sandboxing."""

    # Paths
    working_directory: Path | None = None
    root_directory: Path | None = None
    root_image: Path | None = None
    root_image_options: list[str] | None = None
    root_verity: Path | None = None
    root_hash: str | None = None
    root_hash_signature: Path | None = None
    root_ephemeral: bool | None = None

    # Credentials
    user: str | None = None
    group: str | None = None
    supplementary_groups: list[str] | None = None
    pam_name: str | None = None

    # Environment
    environment: list[str] | None = Field(None, description="KEY=VALUE assignments")
    environment_file: list[Path] | None = None
    pass_environment: list[str] | None = Field(None, description="Variable names passed through from the manager")
    unset_environment: list[str] | None = Field(None, description="Variable names removed from the environment")
    umask: str | None = Field(None, description="Octal file mode creation mask, e.g. 0022")

    # Resource limits
    limit_cpu: str | None = None
    limit_fsize: str | None = None
    limit_nofile: str | None = None
    limit_nproc: str | None = None
    limit_core: str | None = None
    limit_memlock: str | None = None

    # Sandboxing
    no_new_privileges: bool | None = None
    private_tmp: bool | None = None
    private_devices: bool | None = None
    private_users: bool | None = None
    protect_system: ProtectSystem | None = None
    protect_home: ProtectHome | None = None
    protect_hostname: bool | None = None
    protect_clock: bool | None = None
    protect_kernel_tunables: bool | None = None
    protect_kernel_modules: bool | None = None
    protect_control_groups: bool | None = None
    restrict_realtime: bool | None = None
    lock_personality: bool | None = None
    memory_deny_write_execute: bool | None = None

    # Capabilities
    capability_bounding_set: list[str] | None = None
    ambient_capabilities: list[str] | None = None

    # Scheduling
    nice: int | None = None
    oom_score_adjust: int | None = None

    # Filesystem access
    read_write_paths: list[Path] | None = None
    read_only_paths: list[Path] | None = None
    inaccessible_paths: list[Path] | None = None
    runtime_directory: list[str] | None = None
    state_directory: list[str] | None = None
    cache_directory: list[str] | None = None
    logs_directory: list[str] | None = None
    configuration_directory: list[str] | None = None

    # Logging
    standard_output: str | None = None
    standard_error: str | None = None
    syslog_identifier: str | None = None

    # Network
    private_network: bool | None = None
    network_namespace_path: Path | None = None

    # Killing
    kill_mode: KillMode | None = None
    kill_signal: str | None = None

    KEYS: ClassVar[tuple[_FieldSpec, ...]] = (
        ("working_directory", "WorkingDirectory", _format_scalar),
        ("root_directory", "RootDirectory", _format_scalar),
        ("root_image", "RootImage", _format_scalar),
        ("root_image_options", "RootImageOptions", _format_joined),
        ("root_verity", "RootVerity", _format_scalar),
        ("root_hash", "RootHash", _format_scalar),
        ("root_hash_signature", "RootHashSignature", _format_scalar),
        ("root_ephemeral", "RootEphemeral", _format_bool),
        ("user", "User", _format_scalar),
        ("group", "Group", _format_scalar),
        ("supplementary_groups", "SupplementaryGroups", _format_joined),
        ("pam_name", "PAMName", _format_scalar),
        ("environment", "Environment", _format_joined),
        ("environment_file", "EnvironmentFile", _format_each),
        ("pass_environment", "PassEnvironment", _format_joined),
        ("unset_environment", "UnsetEnvironment", _format_joined),
        ("umask", "UMask", _format_scalar),
        ("limit_cpu", "LimitCPU", _format_scalar),
        ("limit_fsize", "LimitFSIZE", _format_scalar),
        ("limit_nofile", "LimitNOFILE", _format_scalar),
        ("limit_nproc", "LimitNPROC", _format_scalar),
        ("limit_core", "LimitCORE", _format_scalar),
        ("limit_memlock", "LimitMEMLOCK", _format_scalar),
        ("no_new_privileges", "NoNewPrivileges", _format_bool),
        ("private_tmp", "PrivateTmp", _format_bool),
        ("private_devices", "PrivateDevices", _format_bool),
        ("private_users", "PrivateUsers", _format_bool),
        ("protect_system", "ProtectSystem", _format_scalar),
        ("protect_home", "ProtectHome", _format_scalar),
        ("protect_hostname", "ProtectHostname", _format_bool),
        ("protect_clock", "ProtectClock", _format_bool),
        ("protect_kernel_tunables", "ProtectKernelTunables", _format_bool),
        ("protect_kernel_modules", "ProtectKernelModules", _format_bool),
        ("protect_control_groups", "ProtectControlGroups", _format_bool),
        ("restrict_realtime", "RestrictRealtime", _format_bool),
        ("lock_personality", "LockPersonality", _format_bool),
        ("memory_deny_write_execute", "MemoryDenyWriteExecute", _format_bool),
        ("capability_bounding_set", "CapabilityBoundingSet", _format_joined),
        ("ambient_capabilities", "AmbientCapabilities", _format_joined),
        ("nice", "Nice", _format_scalar),
        ("oom_score_adjust", "OOMScoreAdjust", _format_scalar),
        ("read_write_paths", "ReadWritePaths", _format_each),
        ("read_only_paths", "ReadOnlyPaths", _format_each),
        ("inaccessible_paths", "InaccessiblePaths", _format_each),
        ("runtime_directory", "RuntimeDirectory", _format_joined),
        ("state_directory", "StateDirectory", _format_joined),
        ("cache_directory", "CacheDirectory", _format_joined),
        ("logs_directory", "LogsDirectory", _format_joined),
        ("configuration_directory", "ConfigurationDirectory", _format_joined),
        ("standard_output", "StandardOutput", _format_scalar),
        ("standard_error", "StandardError", _format_scalar),
        ("syslog_identifier", "SyslogIdentifier", _format_scalar),
        ("private_network", "PrivateNetwork", _format_bool),
        ("network_namespace_path", "NetworkNamespacePath", _format_scalar),
        ("kill_mode", "KillMode", _format_scalar),
        ("kill_signal", "KillSignal", _format_scalar),
    )

    def validate(self) -> None:  # type: ignore[override]
        """Validate the execution environment configuration.

        Raises:
            UnitValidationError: on the first offending value
        """
        if self.nice is not None:
            low, high = NICE_RANGE
            if not low <= self.nice <= high:
                raise UnitValidationError(
                    f"Nice level {self.nice} must be between {low} and {high}", field="nice", value=self.nice
                )

        if self.oom_score_adjust is not None:
            low, high = OOM_SCORE_ADJUST_RANGE
            if not low <= self.oom_score_adjust <= high:
                raise UnitValidationError(
                    f"OOMScoreAdjust {self.oom_score_adjust} must be between {low} and {high}",
                    field="oom_score_adjust",
                    value=self.oom_score_adjust,
                )

        for env_var in self.environment or []:
            if "=" not in env_var:
                raise UnitValidationError(
                    f"Environment variable {env_var!r} must be in KEY=VALUE format",
                    field="environment",
                    value=env_var,
                )
            key, _, _ = env_var.partition("=")
            if not key:
                raise UnitValidationError(
                    f"Invalid environment variable format: {env_var!r}", field="environment", value=env_var
                )

        for field, key in (("pass_environment", "PassEnvironment"), ("unset_environment", "UnsetEnvironment")):
            for var in getattr(self, field) or []:
                if "=" in var:
                    raise UnitValidationError(
                        f"{key} variable {var!r} should not contain '='", field=field, value=var
                    )

        for field in ("capability_bounding_set", "ambient_capabilities"):
            for cap in getattr(self, field) or []:
                if not cap.startswith(CAPABILITY_PREFIX):
                    raise UnitValidationError(
                        f"Capability {cap!r} must start with {CAPABILITY_PREFIX!r}", field=field, value=cap
                    )

        for group in self.supplementary_groups or []:
            if not group:
                raise UnitValidationError(
                    "Supplementary group names cannot be empty", field="supplementary_groups", value=group
                )

        for option in self.root_image_options or []:
            if not option:
                raise UnitValidationError(
                    "RootImageOptions cannot contain empty strings", field="root_image_options", value=option
                )

        if self.umask is not None and not _UMASK_RE.fullmatch(self.umask):
            raise UnitValidationError(
                f"UMask {self.umask!r} must be a 3 or 4 digit octal value", field="umask", value=self.umask
            )

        for field in (
            "runtime_directory",
            "state_directory",
            "cache_directory",
            "logs_directory",
            "configuration_directory",
        ):
            for entry in getattr(self, field) or []:
                if not entry or entry.startswith("/"):
                    raise UnitValidationError(
                        f"{field} entry {entry!r} must be a non-empty relative path", field=field, value=entry
                    )

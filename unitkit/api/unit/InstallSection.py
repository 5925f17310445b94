"""[Install] section: how ``systemctl enable`` wires the unit in."""

import re
from typing import ClassVar

from pydantic import Field

from ..UnitError import UnitValidationError
from ._format_fields import _format_joined, _format_scalar
from ._Options import _FieldSpec, _Section

_INSTANCE_RE = re.compile(r"[A-Za-z0-9_-]+")


class InstallSection(_Section):
    """Options of the [Install] section."""

    HEADER: ClassVar[str] = "Install"

    alias: list[str] | None = Field(None, description="Additional names the unit is installed under")
    wanted_by: list[str] | None = Field(None, description="Units that get a Wants= on this unit when enabled")
    required_by: list[str] | None = Field(None, description="Units that get a Requires= on this unit when enabled")
    upheld_by: list[str] | None = Field(None, description="Units that get an Upholds= on this unit when enabled")
    also: list[str] | None = Field(None, description="Units enabled/disabled together with this one")
    default_instance: str | None = Field(None, description="Instance used when a template is enabled bare")

    KEYS: ClassVar[tuple[_FieldSpec, ...]] = (
        ("alias", "Alias", _format_joined),
        ("wanted_by", "WantedBy", _format_joined),
        ("required_by", "RequiredBy", _format_joined),
        ("upheld_by", "UpheldBy", _format_joined),
        ("also", "Also", _format_joined),
        ("default_instance", "DefaultInstance", _format_scalar),
    )

    def validate(self) -> None:  # type: ignore[override]
        if self.default_instance is not None and not _INSTANCE_RE.fullmatch(self.default_instance):
            raise UnitValidationError(
                f"DefaultInstance {self.default_instance!r} may only contain letters, digits, '_' and '-'",
                field="default_instance",
                value=self.default_instance,
            )

"""Top-level unit file configuration: a service name plus its three sections."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ...constants import UNIT_FILE_SUFFIX
from ..UnitError import UnitIOError, UnitValidationError
from ._Options import _from_pydantic
from .InstallSection import InstallSection
from .ServiceSection import ServiceSection
from .UnitSection import UnitSection


class UnitFile(BaseModel):
    """A complete service unit: [Unit], [Service] and [Install]."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Service name; the unit file is <name>.service")
    unit: UnitSection = Field(default_factory=UnitSection)
    service: ServiceSection = Field(default_factory=ServiceSection)
    install: InstallSection = Field(default_factory=InstallSection)

    @property
    def file_name(self) -> str:
        """Installable unit file name, also the name systemctl knows the unit by."""
        return f"{self.name}{UNIT_FILE_SUFFIX}"

    def render(self) -> str:
        """Full unit file text: Unit, Service, Install blocks back to back."""
        return str(self.unit) + str(self.service) + str(self.install)

    def set(self, **fields: Any) -> "UnitFile":
        """Return a copy with ``fields`` replaced."""
        data = {name: getattr(self, name) for name in self.model_fields_set}
        data.update(fields)
        return self.from_dict(data)

    def validate(self) -> None:  # type: ignore[override]
        """Validate the name and every section, in document order.

        Raises:
            UnitValidationError: on the first offending value
        """
        if not self.name or "/" in self.name:
            raise UnitValidationError(
                f"Service name {self.name!r} must be non-empty and must not contain '/'",
                field="name",
                value=self.name,
            )
        self.unit.validate()
        self.service.validate()
        self.install.validate()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UnitFile":
        """Build a UnitFile from a mapping, e.g. parsed JSON.

        Raises:
            UnitValidationError: if the mapping does not describe a unit file
        """
        if not isinstance(data, dict):
            raise UnitValidationError(f"unit file config must be a dict, got {type(data).__name__}")
        try:
            return cls(**data)
        except PydanticValidationError as e:
            raise _from_pydantic(e) from e

    @classmethod
    def load(cls, path: Path) -> "UnitFile":
        """Load a UnitFile from a JSON document.

        Raises:
            UnitValidationError: if the file is missing, not UTF-8 JSON, or not a valid configuration
            UnitIOError: if the file exists but cannot be read
        """
        path = Path(path)
        if not path.exists():
            raise UnitValidationError(f"Configuration file not found at {path}", field="path", value=str(path))

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise UnitValidationError(f"Invalid JSON in config file {path}: {e}", field="path", value=str(path)) from e
        except UnicodeDecodeError as e:
            raise UnitValidationError(f"Config file {path} is not UTF-8: {e}", field="path", value=str(path)) from e
        except OSError as e:
            raise UnitIOError(f"Failed to read config file {path}", os_error=e) from e

        return cls.from_dict(raw)

"""Base models shared by every unit file section."""

from collections.abc import Callable
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from ..UnitError import UnitValidationError

_FieldSpec = tuple[str, str, Callable[[str, Any], list[str]]]


def _from_pydantic(error: PydanticValidationError) -> UnitValidationError:
    """Convert the first pydantic error into a UnitValidationError naming the field."""
    error_list = error.errors() or [{"msg": str(error), "loc": (), "input": None}]
    first = error_list[0]
    loc = first.get("loc", ())
    field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
    msg = first.get("msg", str(error))
    detail = f"{field}: {msg}" if field else msg
    return UnitValidationError(detail, field=field or None, value=first.get("input"))


class _Options(BaseModel):
    """A flat set of optional fields rendered as ``Key=Value`` lines.

    Subclasses list their fields in ``KEYS`` in canonical render order. Every
    field defaults to None, and None never produces a line.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    KEYS: ClassVar[tuple[_FieldSpec, ...]] = ()

    def set(self, **fields: Any) -> Any:
        """Return a copy of this record with ``fields`` replaced.

        Raises:
            UnitValidationError: unknown field name or a value of the wrong type
        """
        data = {name: getattr(self, name) for name in self.model_fields_set}
        data.update(fields)
        try:
            return type(self)(**data)
        except PydanticValidationError as e:
            raise _from_pydantic(e) from e

    def lines(self) -> list[str]:
        """Field lines in canonical order, without a section header."""
        out: list[str] = []
        for name, key, formatter in self.KEYS:
            out.extend(formatter(key, getattr(self, name)))
        return out

    def validate(self) -> None:  # type: ignore[override]
        """Check documented value constraints. Subclasses add their rules."""
        return None


class _Section(_Options):
    """An ``[Header]`` block of a unit file."""

    HEADER: ClassVar[str] = ""

    def render(self) -> list[str]:
        """Header line followed by the field lines."""
        return [f"[{self.HEADER}]", *self.lines()]

    def __str__(self) -> str:
        return "".join(f"{line}\n" for line in self.render())

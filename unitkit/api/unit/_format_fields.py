"""Render optional field values into ``Key=Value`` lines.

None of these helpers quote or escape anything: values are written as given.
"""

from collections.abc import Callable, Sequence
from enum import Enum
from typing import Any

_Formatter = Callable[[str, Any], list[str]]


def _token(value: Any) -> str:
    """Canonical string form of a single value."""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _format_scalar(key: str, value: Any) -> list[str]:
    """``Key=value`` if present."""
    if value is None:
        return []
    return [f"{key}={_token(value)}"]


def _format_joined(key: str, values: Sequence[Any] | None) -> list[str]:
    """One ``Key=a b c`` line; nothing for an absent or empty list."""
    if not values:
        return []
    return [f"{key}={' '.join(_token(v) for v in values)}"]


def _format_each(key: str, values: Sequence[Any] | None) -> list[str]:
    """One ``Key=v`` line per element, order and duplicates preserved."""
    if values is None:
        return []
    return [f"{key}={_token(v)}" for v in values]


def _format_bool(key: str, value: bool | None) -> list[str]:
    """``Key=yes`` / ``Key=no`` if present."""
    if value is None:
        return []
    return [f"{key}={'yes' if value else 'no'}"]

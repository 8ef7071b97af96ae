"""Field converters for the serialization boundary.

Every serialized field has a wire form that is a plain string. The same
string is used as the JSON property value and as the binary field payload,
so one converter per field covers both formats.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class TypeChangeConverter(Generic[T]):
    """Converts a field value to and from its wire string."""

    def to_wire(self, value: T) -> str:
        raise NotImplementedError

    def from_wire(self, value: Any) -> T:
        raise NotImplementedError


class TextConverter(TypeChangeConverter[str]):
    """Pass-through for free-text fields. A null wire value becomes ``""``."""

    def to_wire(self, value: str) -> str:
        return value

    def from_wire(self, value: Any) -> str:
        return "" if value is None else str(value)


class UtcDatetimeConverter(TypeChangeConverter[datetime]):
    """ISO 8601 timestamps, always normalized to UTC.

    Naive inputs are interpreted as UTC.
    """

    def to_wire(self, value: datetime) -> str:
        return _as_utc(value).isoformat()

    def from_wire(self, value: Any) -> datetime:
        if not isinstance(value, str):
            raise ValueError(f"expected an ISO 8601 string, got {value!r}")
        return _as_utc(datetime.fromisoformat(value))


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(frozen=True)
class FieldSpec:
    """Stable serialization identity of one data field.

    Attributes:
        attr: Python attribute name on the data type
        name: JSON property name (stable, may be persisted by consumers)
        tag: Binary field tag, 1-255 (stable, may be persisted by consumers)
        converter: Converter between the attribute value and its wire string
    """

    attr: str
    name: str
    tag: int
    converter: TypeChangeConverter

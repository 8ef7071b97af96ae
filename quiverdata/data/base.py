"""Host-facing interface for custom data types.

A data type is a frozen dataclass deriving from :class:`BaseData`. The host
only talks to it through this narrow surface:

- ``get_source(context)``: where the raw file for a subscription lives
- ``reader(context, line)``: one raw line -> one typed record
- ``clone()``: independent copy with identical field values
- metadata queries: mapping, sparseness, resolutions, time zone

The host owns scheduling and the actual file reads. Data types never
touch the filesystem.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from datetime import date, datetime, timedelta, timezone, tzinfo
from enum import Enum
from pathlib import Path
from typing import Any, ClassVar, TypeVar

from quiverdata.data.converters import FieldSpec, TextConverter, UtcDatetimeConverter

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

TData = TypeVar("TData", bound="BaseData")


class FormatError(ValueError):
    """A raw line or serialized payload could not be parsed.

    Raised per record so the caller can skip or log the offending input and
    continue with the rest of the file.
    """

    def __init__(self, message: str, line: str | None = None):
        super().__init__(message)
        self.line = line


class Resolution(str, Enum):
    """Time granularity of a data subscription."""

    TICK = "tick"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAILY = "daily"


class TransportMedium(str, Enum):
    """How the host should fetch a resolved source."""

    LOCAL_FILE = "local_file"


@dataclass(frozen=True)
class SubscriptionContext:
    """Per-subscription inputs passed to ``get_source`` and ``reader``."""

    symbol: str
    date: date
    live_mode: bool = False


@dataclass(frozen=True)
class SubscriptionDataSource:
    """Resolved location of a data type's raw input."""

    source: str
    transport_medium: TransportMedium = TransportMedium.LOCAL_FILE

    @property
    def path(self) -> Path:
        return Path(self.source)


@dataclass(frozen=True)
class BaseData:
    """Base record: an opaque symbol and the UTC time the record refers to.

    ``end_time`` is derived from ``time`` and the class-level ``period``; it
    is never stored per instance.
    """

    symbol: str = ""
    time: datetime = EPOCH

    period: ClassVar[timedelta] = timedelta(0)
    serialized_fields: ClassVar[tuple[FieldSpec, ...]] = (
        FieldSpec("symbol", "Symbol", 1, TextConverter()),
        FieldSpec("time", "Time", 2, UtcDatetimeConverter()),
    )

    @property
    def end_time(self) -> datetime:
        """Time the data became available."""
        return self.time + self.period

    @classmethod
    def get_source(cls, context: SubscriptionContext) -> SubscriptionDataSource:
        raise NotImplementedError(f"{cls.__name__} does not define a source")

    @classmethod
    def reader(cls: type[TData], context: SubscriptionContext, line: str) -> TData:
        raise NotImplementedError(f"{cls.__name__} does not define a reader")

    def clone(self: TData) -> TData:
        return replace(self)

    @classmethod
    def requires_mapping(cls) -> bool:
        """Whether corporate events (renames, delistings) apply to the symbol."""
        return False

    @classmethod
    def is_sparse_data(cls) -> bool:
        """Whether missing days are expected. Hosts silence missing-file logs when True."""
        return False

    @classmethod
    def default_resolution(cls) -> Resolution:
        return Resolution.MINUTE

    @classmethod
    def supported_resolutions(cls) -> list[Resolution]:
        return list(Resolution)

    @classmethod
    def data_time_zone(cls) -> tzinfo:
        return timezone.utc

    def to_row(self) -> dict[str, Any]:
        """Flat row for tabular output: symbol, time, end_time, then type fields."""
        row: dict[str, Any] = {"symbol": self.symbol, "time": self.time, "end_time": self.end_time}
        for f in fields(self):
            if f.name in row:
                continue
            value = getattr(self, f.name)
            row[f.name] = value.value if isinstance(value, Enum) else value
        return row

    def __str__(self) -> str:
        return f"{self.symbol} - {self.time.isoformat()}"

"""Quiver Quantitative CNBC data type.

Each line of ``alternative/quiver/cnbc/<symbol>.csv`` is one trade that a
guest disclosed on CNBC::

    <YYYYMMDD>,<notes>,<direction>,<traders>

Lines are split on every comma; there is no quoting, so a comma inside
``notes`` or ``traders`` shifts the remaining fields.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from typing import ClassVar

from quiverdata import config
from quiverdata._error_messages import insufficient_fields_error, invalid_date_error
from quiverdata.data.base import (
    BaseData,
    FormatError,
    Resolution,
    SubscriptionContext,
    SubscriptionDataSource,
    TransportMedium,
)
from quiverdata.data.converters import FieldSpec, TextConverter
from quiverdata.orders import OrderDirection
from quiverdata.vendors.quiver.converters import (
    TransactionDirectionConverter,
    normalize_direction,
)

_DATE_RE = re.compile(r"[0-9]{8}")
_FIELD_COUNT = 4


@dataclass(frozen=True)
class QuiverCNBC(BaseData):
    """Trade disclosed by a CNBC guest, stamped one day before the report date."""

    notes: str = ""
    direction: OrderDirection = OrderDirection.HOLD
    traders: str = ""

    # Time between the date of the data and the time it became available
    period: ClassVar[timedelta] = timedelta(days=1)
    serialized_fields: ClassVar[tuple[FieldSpec, ...]] = BaseData.serialized_fields + (
        FieldSpec("notes", "Notes", 11, TextConverter()),
        FieldSpec("direction", "Direction", 12, TransactionDirectionConverter()),
        FieldSpec("traders", "Traders", 13, TextConverter()),
    )

    @classmethod
    def get_source(cls, context: SubscriptionContext) -> SubscriptionDataSource:
        """One file per symbol holding its full history; the context date is not used."""
        path = (
            config.get_data_folder()
            / "alternative"
            / "quiver"
            / "cnbc"
            / f"{context.symbol.lower()}.csv"
        )
        return SubscriptionDataSource(str(path), TransportMedium.LOCAL_FILE)

    @classmethod
    def reader(cls, context: SubscriptionContext, line: str) -> QuiverCNBC:
        """Parse one CSV line.

        Raises:
            FormatError: If the line has fewer than four fields or the date
                is not exactly ``YYYYMMDD``
        """
        csv = line.split(",")
        if len(csv) < _FIELD_COUNT:
            raise FormatError(insufficient_fields_error(line, len(csv), _FIELD_COUNT), line=line)

        return cls(
            symbol=context.symbol,
            time=_event_time(csv[0], line, cls.period),
            notes=csv[1],
            direction=normalize_direction(csv[2]),
            traders=csv[3],
        )

    @classmethod
    def requires_mapping(cls) -> bool:
        return True

    @classmethod
    def is_sparse_data(cls) -> bool:
        return True

    @classmethod
    def default_resolution(cls) -> Resolution:
        return Resolution.DAILY

    @classmethod
    def supported_resolutions(cls) -> list[Resolution]:
        return [Resolution.DAILY]

    @classmethod
    def data_time_zone(cls) -> tzinfo:
        return timezone.utc

    def __str__(self) -> str:
        return f"{self.symbol} - {self.traders} - {self.direction.value}"


def _event_time(raw: str, line: str, lag: timedelta) -> datetime:
    """Report date in UTC shifted back by ``lag``; both steps fail as FormatError."""
    # strptime also accepts short forms such as "2020011"
    if not _DATE_RE.fullmatch(raw):
        raise FormatError(invalid_date_error(raw), line=line)
    try:
        return datetime.strptime(raw, "%Y%m%d").replace(tzinfo=timezone.utc) - lag
    except (ValueError, OverflowError) as exc:
        raise FormatError(invalid_date_error(raw), line=line) from exc

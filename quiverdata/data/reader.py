"""File-level reading for tooling.

The host normally streams lines into ``reader`` itself. These helpers do the
same for the CLI and for offline inspection: malformed lines are logged and
skipped, and a missing file for a sparse data type is not treated as a problem.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

import polars as pl

from quiverdata.data.base import (
    BaseData,
    FormatError,
    SubscriptionContext,
    TData,
)

logger = logging.getLogger(__name__)


def read_lines(
    data_type: type[TData],
    context: SubscriptionContext,
    lines: Iterable[str],
) -> Iterator[TData]:
    """Parse raw lines into records, skipping blank and malformed lines."""
    skipped = 0
    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        try:
            yield data_type.reader(context, line)
        except FormatError as exc:
            skipped += 1
            logger.warning(f"{data_type.__name__} {context.symbol}: skipping line {line_number}: {exc}")

    if skipped:
        logger.info(f"{data_type.__name__} {context.symbol}: skipped {skipped} malformed line(s)")


def read_file(
    data_type: type[TData],
    context: SubscriptionContext,
    path: Path,
) -> list[TData]:
    """Read every record from a local file. A missing file yields no records."""
    if not path.exists():
        if data_type.is_sparse_data():
            logger.debug(f"{data_type.__name__}: no file for {context.symbol} at {path}")
        else:
            logger.warning(f"{data_type.__name__}: missing file for {context.symbol}: {path}")
        return []

    with path.open("r", encoding="utf-8") as handle:
        return list(read_lines(data_type, context, handle))


def read_source(data_type: type[TData], context: SubscriptionContext) -> list[TData]:
    """Resolve the subscription's source and read it."""
    source = data_type.get_source(context)
    return read_file(data_type, context, source.path)


def to_frame(records: Sequence[BaseData]) -> pl.DataFrame:
    """Tabulate records (one row per record) for display or export."""
    if not records:
        return pl.DataFrame()
    return pl.DataFrame([record.to_row() for record in records])

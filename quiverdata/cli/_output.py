"""Output helpers for CLI commands."""

from __future__ import annotations

import json
import sys
from datetime import date, datetime
from pathlib import Path
from typing import Any

import polars as pl


def print_rows(rows: list[dict[str, Any]]) -> None:
    """Print dicts sharing the first row's keys as an aligned text table."""
    if not rows:
        return
    cols = list(rows[0])
    cells = [[str(row.get(c, "")) for c in cols] for row in rows]
    widths = [max(len(c), *(len(r[i]) for r in cells)) for i, c in enumerate(cols)]
    print("  ".join(c.ljust(w) for c, w in zip(cols, widths)))
    print("  ".join("-" * w for w in widths))
    for r in cells:
        print("  ".join(v.ljust(w) for v, w in zip(r, widths)))


def _json_default(value: Any) -> str:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def _render(df: pl.DataFrame, fmt: str) -> str:
    if fmt == "table":
        return f"{df}\n"
    if fmt == "csv":
        return df.write_csv()
    if fmt == "json":
        return json.dumps(df.to_dicts(), default=_json_default, indent=2) + "\n"
    raise ValueError(f"unknown format '{fmt}'")


def write_frame(
    df: pl.DataFrame,
    *,
    fmt: str = "table",
    output: str | Path | None = None,
    limit: int | None = None,
) -> None:
    """Render parsed records as table, csv or json to stdout or a file."""
    if limit is not None:
        df = df.head(limit)
    text = _render(df, fmt)
    if output is None:
        sys.stdout.write(text)
    else:
        Path(output).write_text(text, encoding="utf-8")

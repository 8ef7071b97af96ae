"""Tests for the JSON and binary serialization boundary."""

from __future__ import annotations

import json
import struct
from datetime import datetime, timezone

import pytest

from quiverdata.data.base import FormatError
from quiverdata.data.serialization import (
    BINARY_MAGIC,
    from_bytes,
    from_dict,
    from_json,
    to_bytes,
    to_dict,
    to_json,
)
from quiverdata.orders import OrderDirection
from quiverdata.vendors.quiver import QuiverCNBC


@pytest.fixture
def record() -> QuiverCNBC:
    return QuiverCNBC(
        symbol="TSLA",
        time=datetime(2021, 3, 4, tzinfo=timezone.utc),
        notes="Appeared on Fast Money, “naïve” café",
        direction=OrderDirection.SELL,
        traders="Karen Finerman",
    )


def test_to_dict_uses_stable_property_names(record):
    payload = to_dict(record)

    assert payload == {
        "Symbol": "TSLA",
        "Time": "2021-03-04T00:00:00+00:00",
        "Notes": "Appeared on Fast Money, “naïve” café",
        "Direction": "Sell",
        "Traders": "Karen Finerman",
        "EndTime": "2021-03-05T00:00:00+00:00",
    }


def test_json_round_trip(record):
    decoded = from_json(QuiverCNBC, to_json(record))

    assert decoded == record
    assert decoded.end_time == record.end_time


def test_binary_round_trip(record):
    decoded = from_bytes(QuiverCNBC, to_bytes(record))

    assert decoded == record


def test_binary_uses_field_tags(record):
    data = to_bytes(record)

    assert data.startswith(BINARY_MAGIC)
    tag, length = struct.unpack_from(">BI", data, len(BINARY_MAGIC))
    assert tag == 1
    assert data[len(BINARY_MAGIC) + 5 : len(BINARY_MAGIC) + 5 + length] == b"TSLA"


def test_from_dict_normalizes_vendor_direction():
    decoded = from_dict(
        QuiverCNBC,
        {"Symbol": "AAPL", "Time": "2020-01-13T00:00:00+00:00", "Direction": "Bullish"},
    )

    assert decoded.direction == OrderDirection.BUY
    assert decoded.notes == ""
    assert decoded.traders == ""


def test_from_dict_null_direction_is_hold():
    decoded = from_dict(QuiverCNBC, {"Symbol": "AAPL", "Direction": None})

    assert decoded.direction == OrderDirection.HOLD


def test_from_dict_ignores_end_time():
    decoded = from_dict(
        QuiverCNBC,
        {"Time": "2020-01-13T00:00:00+00:00", "EndTime": "1999-01-01T00:00:00+00:00"},
    )

    assert decoded.end_time == datetime(2020, 1, 14, tzinfo=timezone.utc)


def test_from_dict_naive_time_is_utc():
    decoded = from_dict(QuiverCNBC, {"Time": "2020-01-13T00:00:00"})

    assert decoded.time == datetime(2020, 1, 13, tzinfo=timezone.utc)


def test_from_json_rejects_invalid_json():
    with pytest.raises(FormatError, match="Cannot decode JSON payload"):
        from_json(QuiverCNBC, "{not json")


def test_from_json_rejects_non_object():
    with pytest.raises(FormatError, match="expected an object"):
        from_json(QuiverCNBC, json.dumps([1, 2, 3]))


def test_from_dict_rejects_bad_time():
    with pytest.raises(FormatError, match="field Time"):
        from_dict(QuiverCNBC, {"Time": "yesterday"})


def test_from_bytes_rejects_missing_magic(record):
    with pytest.raises(FormatError, match="missing QVD1 header"):
        from_bytes(QuiverCNBC, to_bytes(record)[4:])


def test_from_bytes_rejects_truncated_payload(record):
    with pytest.raises(FormatError, match="truncated"):
        from_bytes(QuiverCNBC, to_bytes(record)[:-3])


def test_from_bytes_skips_unknown_tags(record):
    extra = struct.pack(">BI", 200, 3) + b"new"

    assert from_bytes(QuiverCNBC, to_bytes(record) + extra) == record


def test_reserved_date_field_is_not_emitted_and_is_ignored(record):
    assert "Date" not in to_dict(record)
    assert 10 not in {spec.tag for spec in QuiverCNBC.serialized_fields}

    legacy_json = {**to_dict(record), "Date": "2021-03-05"}
    legacy_bytes = to_bytes(record) + struct.pack(">BI", 10, 10) + b"2021-03-05"

    assert from_dict(QuiverCNBC, legacy_json) == record
    assert from_bytes(QuiverCNBC, legacy_bytes) == record

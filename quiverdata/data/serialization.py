"""Serialization boundary for data types.

Two formats share each type's ``serialized_fields``:

JSON
    One object per record keyed by the stable field names. ``EndTime`` is
    written for readers and ignored on decode.

Binary
    ``QVD1`` magic followed by ``[tag:u8][length:u32 BE][utf-8 payload]``
    entries. Unknown tags are skipped so older readers accept newer payloads.
"""

from __future__ import annotations

import json
import logging
import struct
from collections.abc import Mapping
from typing import Any

from quiverdata._error_messages import invalid_payload_error
from quiverdata.data.base import BaseData, FormatError, TData
from quiverdata.data.converters import UtcDatetimeConverter

logger = logging.getLogger(__name__)

BINARY_MAGIC = b"QVD1"
_FIELD_HEADER = struct.Struct(">BI")
_END_TIME_CONVERTER = UtcDatetimeConverter()


def to_dict(record: BaseData) -> dict[str, Any]:
    payload = {
        spec.name: spec.converter.to_wire(getattr(record, spec.attr))
        for spec in record.serialized_fields
    }
    payload["EndTime"] = _END_TIME_CONVERTER.to_wire(record.end_time)
    return payload


def from_dict(data_type: type[TData], payload: Mapping[str, Any]) -> TData:
    """Build a record from a decoded JSON object.

    Absent properties keep the dataclass default.
    """
    if not isinstance(payload, Mapping):
        raise FormatError(
            invalid_payload_error("JSON", f"expected an object, got {type(payload).__name__}")
        )

    kwargs: dict[str, Any] = {}
    for spec in data_type.serialized_fields:
        if spec.name not in payload:
            continue
        try:
            kwargs[spec.attr] = spec.converter.from_wire(payload[spec.name])
        except (TypeError, ValueError) as exc:
            raise FormatError(invalid_payload_error("JSON", f"field {spec.name}: {exc}")) from exc
    return data_type(**kwargs)


def to_json(record: BaseData, **dumps_options: Any) -> str:
    return json.dumps(to_dict(record), **dumps_options)


def from_json(data_type: type[TData], text: str | bytes) -> TData:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise FormatError(invalid_payload_error("JSON", str(exc))) from exc
    return from_dict(data_type, payload)


def to_bytes(record: BaseData) -> bytes:
    buffer = bytearray(BINARY_MAGIC)
    for spec in record.serialized_fields:
        encoded = spec.converter.to_wire(getattr(record, spec.attr)).encode("utf-8")
        buffer += _FIELD_HEADER.pack(spec.tag, len(encoded))
        buffer += encoded
    return bytes(buffer)


def from_bytes(data_type: type[TData], data: bytes) -> TData:
    """Decode a binary payload produced by :func:`to_bytes`.

    Raises:
        FormatError: On a bad magic, a truncated entry or an undecodable field
    """
    if data[: len(BINARY_MAGIC)] != BINARY_MAGIC:
        raise FormatError(invalid_payload_error("binary", "missing QVD1 header"))

    specs_by_tag = {spec.tag: spec for spec in data_type.serialized_fields}
    kwargs: dict[str, Any] = {}
    offset = len(BINARY_MAGIC)
    while offset < len(data):
        if offset + _FIELD_HEADER.size > len(data):
            raise FormatError(invalid_payload_error("binary", f"truncated field header at {offset}"))
        tag, length = _FIELD_HEADER.unpack_from(data, offset)
        offset += _FIELD_HEADER.size
        end = offset + length
        if end > len(data):
            raise FormatError(invalid_payload_error("binary", f"truncated payload for tag {tag}"))
        raw = bytes(data[offset:end])
        offset = end

        spec = specs_by_tag.get(tag)
        if spec is None:
            logger.debug(f"{data_type.__name__}: skipping unknown binary tag {tag}")
            continue
        try:
            kwargs[spec.attr] = spec.converter.from_wire(raw.decode("utf-8"))
        except ValueError as exc:
            raise FormatError(invalid_payload_error("binary", f"tag {tag}: {exc}")) from exc
    return data_type(**kwargs)

"""Error message templates for quiverdata.

Messages include a clear problem description, the offending input and,
where a lookup failed, fuzzy "Did you mean...?" suggestions.
"""

from __future__ import annotations

from difflib import get_close_matches


def invalid_date_error(raw: str, expected_format: str = "YYYYMMDD") -> str:
    """Error message when a line's date field does not match the expected pattern."""
    return (
        f"Invalid date field {raw!r}: expected exactly {expected_format} "
        "(digits only, no separators).\n"
        "\n"
        "Example of a valid line:\n"
        "  20200114,Appeared on Squawk Box,Buy,John Doe"
    )


def insufficient_fields_error(line: str, found: int, expected: int) -> str:
    """Error message when a line has fewer comma-separated fields than required."""
    return (
        f"Expected at least {expected} comma-separated fields, found {found}.\n"
        f"  line: {line!r}\n"
        "\n"
        "Fields are split on ',' without quoting support, so every field must be present."
    )


def invalid_payload_error(fmt: str, reason: str) -> str:
    """Error message when a serialized payload cannot be decoded."""
    return f"Cannot decode {fmt} payload: {reason}"


def data_type_not_found_error(name: str, registered: list[str]) -> str:
    """Error message for a registry miss.

    Registry keys are case-insensitive, so suggestions are matched on
    lowercased names and reported with their class-name spelling.
    """
    by_key = {data_type.lower(): data_type for data_type in registered}
    close = [by_key[key] for key in get_close_matches(name.lower(), list(by_key), n=3, cutoff=0.6)]

    lines = [f"Data type '{name}' is not registered."]
    if close:
        lines.append(f"Did you mean: {', '.join(close)}?")
    if registered:
        lines.append(f"Registered data types: {', '.join(sorted(registered))}")
    else:
        lines.append("No data types are registered; import quiverdata.vendors to register them.")
    return "\n".join(lines)

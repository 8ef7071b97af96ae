"""Tests for error message templates."""

from quiverdata._error_messages import (
    data_type_not_found_error,
    insufficient_fields_error,
    invalid_date_error,
    invalid_payload_error,
)


def test_invalid_date_error():
    error = invalid_date_error("2020-01-14")

    assert "'2020-01-14'" in error
    assert "YYYYMMDD" in error
    assert "Example of a valid line" in error


def test_insufficient_fields_error():
    error = insufficient_fields_error("20200101,note,buy", 3, 4)

    assert "at least 4" in error
    assert "found 3" in error
    assert "'20200101,note,buy'" in error


def test_invalid_payload_error():
    assert invalid_payload_error("binary", "bad") == "Cannot decode binary payload: bad"


def test_data_type_not_found_with_suggestions():
    error = data_type_not_found_error("quivercnb", ["QuiverCNBC", "QuiverLobbying"])

    assert "'quivercnb' is not registered" in error
    assert "Did you mean" in error
    assert "Did you mean: QuiverCNBC?" in error
    assert "Registered data types: QuiverCNBC, QuiverLobbying" in error


def test_data_type_not_found_no_suggestions():
    error = data_type_not_found_error("xyzzyx", ["QuiverCNBC"])

    assert "Did you mean" not in error
    assert "Registered data types:" in error
    assert "QuiverCNBC" in error


def test_data_type_not_found_empty_registry():
    error = data_type_not_found_error("QuiverCNBC", [])

    assert "Did you mean" not in error
    assert "import quiverdata.vendors" in error

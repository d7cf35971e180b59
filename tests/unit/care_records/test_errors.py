"""
Tests for decode error mapping in `care_records/domain/errors.py`.
"""

import pytest
from pydantic import ValidationError

from care_records.domain.errors import (
    MissingFieldError,
    RangeViolationError,
    RecordDecodeError,
    TypeMismatchError,
    field_path,
    from_validation_error,
)
from care_records.domain.models import LocationReading


def _validation_error(payload: dict) -> ValidationError:
    with pytest.raises(ValidationError) as excinfo:
        LocationReading.model_validate(payload)
    return excinfo.value


@pytest.mark.parametrize(
    "loc,expected",
    [
        ((), ""),
        (("deviceId",), "deviceId"),
        (("locationData", "batteryLevel"), "locationData.batteryLevel"),
        (("boundaryPoints", 2, "y"), "boundaryPoints[2].y"),
        ((0, "x"), "[0].x"),
    ],
)
def test_field_path(loc: tuple, expected: str) -> None:
    assert field_path(loc) == expected


def test_missing_maps_to_missing_field_error() -> None:
    error = from_validation_error(_validation_error({"x": 1.0, "y": 2.0}), "LocationReading")

    assert isinstance(error, MissingFieldError)
    assert error.field == "deviceId"


def test_bound_maps_to_range_violation() -> None:
    exc = _validation_error({"deviceId": "d", "x": 1.0, "y": 2.0, "batteryLevel": 101})

    error = from_validation_error(exc, "LocationReading")

    assert isinstance(error, RangeViolationError)
    assert error.field == "batteryLevel"


def test_non_finite_maps_to_range_violation() -> None:
    exc = _validation_error({"deviceId": "d", "x": float("inf"), "y": 2.0})
    assert isinstance(from_validation_error(exc, "LocationReading"), RangeViolationError)


def test_wrong_type_maps_to_type_mismatch() -> None:
    exc = _validation_error({"deviceId": "d", "x": "north", "y": 2.0})

    error = from_validation_error(exc, "LocationReading")

    assert isinstance(error, TypeMismatchError)
    assert error.field == "x"


def test_only_first_error_reported() -> None:
    """Several problems still produce a single error for the first field."""
    exc = _validation_error({"x": "north", "batteryLevel": 500})

    error = from_validation_error(exc, "LocationReading")

    assert isinstance(error, MissingFieldError)
    assert error.field == "deviceId"


def test_error_message_includes_location() -> None:
    error = RangeViolationError("LocationReading", "batteryLevel", "too high")

    assert isinstance(error, RecordDecodeError)
    assert str(error) == "LocationReading.batteryLevel: too high"
    assert str(TypeMismatchError("Point", "", "bad json")) == "Point: bad json"

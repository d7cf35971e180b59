"""
Tests for the Result type in `care_records/services/result.py`.
"""

import pytest

from care_records.domain.errors import MissingFieldError
from care_records.services.result import Result


class TestResult:
    """Test the Result type for explicit error handling."""

    def test_result_ok_creates_successful_result(self) -> None:
        result: Result[str, Exception] = Result.ok("success")
        assert result.is_ok()
        assert not result.is_err()
        assert result.unwrap() == "success"

    def test_result_error_creates_failed_result(self) -> None:
        error = ValueError("test error")
        result: Result[str, ValueError] = Result.err(error)
        assert not result.is_ok()
        assert result.is_err()
        assert result.unwrap_or("default") == "default"

    def test_unwrap_raises_on_error_result(self) -> None:
        error = MissingFieldError("PatientEvent", "patientId", "Field required")
        result: Result[str, MissingFieldError] = Result.err(error)

        with pytest.raises(MissingFieldError, match="patientId"):
            result.unwrap()

    def test_unwrap_err_on_ok_raises(self) -> None:
        with pytest.raises(ValueError, match="Ok value"):
            Result.ok(1).unwrap_err()

    def test_empty_list_is_a_value(self) -> None:
        assert Result.ok([]).unwrap() == []

    def test_requires_exactly_one_of_value_or_error(self) -> None:
        with pytest.raises(ValueError):
            Result()
        with pytest.raises(ValueError):
            Result(value=1, error=ValueError("x"))

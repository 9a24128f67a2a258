"""Tests for the error response schema."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from feedback_api.schemas.error import ErrorResponse


class TestErrorResponse:
    """Test suite for ErrorResponse."""

    def test_single_error(self):
        response = ErrorResponse(
            message="Resource not found", error="gone", path="uri=/api/x"
        )

        assert response.success is False
        assert isinstance(response.timestamp, datetime)
        assert response.timestamp.tzinfo is None

    def test_to_content_is_json_compatible(self):
        response = ErrorResponse(
            message="Validation failed",
            errors={"name": "must not be blank"},
            path="uri=/api/x",
            timestamp=datetime(2026, 1, 15, 14, 22, 15),
        )

        assert response.to_content() == {
            "success": False,
            "message": "Validation failed",
            "errors": {"name": "must not be blank"},
            "timestamp": "2026-01-15T14:22:15",
            "path": "uri=/api/x",
        }

    def test_empty_errors_mapping_is_kept(self):
        response = ErrorResponse(message="Validation failed", errors={}, path="p")

        assert response.to_content()["errors"] == {}

    def test_requires_exactly_one_detail(self):
        with pytest.raises(ValidationError):
            ErrorResponse(message="m", path="p")

        with pytest.raises(ValidationError):
            ErrorResponse(message="m", error="e", errors={"a": "b"}, path="p")

    def test_success_cannot_be_true(self):
        with pytest.raises(ValidationError):
            ErrorResponse(success=True, message="m", error="e", path="p")

    def test_is_immutable(self):
        response = ErrorResponse(message="m", error="e", path="p")

        with pytest.raises(ValidationError):
            response.error = "changed"

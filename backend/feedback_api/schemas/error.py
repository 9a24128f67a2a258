"""Error response schema for consistent API error formatting."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ErrorResponse(BaseModel):
    """Standardized error response format.

    Exactly one of ``error`` (single detail) or ``errors`` (field -> message)
    is set. The unset one is omitted when serialized with ``to_content()``.
    """

    model_config = ConfigDict(
        title="error.ErrorResponse",
        frozen=True,
        json_schema_extra={
            "example": {
                "success": False,
                "message": "Resource not found",
                "error": "Feedback not found with id: 42",
                "timestamp": "2026-01-15T14:22:15.123456",
                "path": "uri=/api/feedbacks/42",
            }
        },
    )

    success: Literal[False] = Field(
        False, description="Always false for error responses"
    )
    message: str = Field(..., description="Error category label")
    error: str | None = Field(None, description="Error detail")
    errors: dict[str, str] | None = Field(
        None, description="Validation messages keyed by field name"
    )
    timestamp: datetime = Field(
        default_factory=datetime.now,
        description="Server time when the error occurred",
    )
    path: str = Field(..., description="Descriptor of the originating request")

    @model_validator(mode="after")
    def _check_single_detail(self) -> ErrorResponse:
        if (self.error is None) == (self.errors is None):
            raise ValueError("exactly one of 'error' or 'errors' must be set")
        return self

    def to_content(self) -> dict[str, Any]:
        """JSON-compatible body with the unused detail field left out."""
        return self.model_dump(mode="json", exclude_none=True)

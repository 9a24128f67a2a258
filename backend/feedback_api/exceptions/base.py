"""Base exception for failures raised by feedback request handling.

``message`` is what the translator may show the caller. ``details`` is
structured context for the server log and never appears in a response body.
"""

from typing import Any


class FeedbackError(Exception):
    """Root of the feedback domain exceptions."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', details={self.details})"

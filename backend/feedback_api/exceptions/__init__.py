"""Custom exceptions for the feedback application."""

from .base import FeedbackError
from .business import InvalidArgumentError, ResourceNotFoundError
from .validation import FieldValidationError, FieldViolation

__all__ = [
    "FeedbackError",
    "FieldValidationError",
    "FieldViolation",
    "InvalidArgumentError",
    "ResourceNotFoundError",
]

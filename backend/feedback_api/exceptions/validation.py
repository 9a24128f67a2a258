"""Validation exceptions."""

from collections.abc import Iterable
from typing import NamedTuple

from .base import FeedbackError


class FieldViolation(NamedTuple):
    """A single input field that failed validation."""

    field: str
    message: str


class FieldValidationError(FeedbackError):
    """Raised when one or more input fields fail validation.

    Violations keep the order in which they were recorded; the same field
    may appear more than once.
    """

    def __init__(self, violations: Iterable[FieldViolation | tuple[str, str]]) -> None:
        self.violations = tuple(FieldViolation(*v) for v in violations)
        count = len(self.violations)
        super().__init__(
            f"{count} field violation{'' if count == 1 else 's'}",
            details={"fields": [v.field for v in self.violations]},
        )

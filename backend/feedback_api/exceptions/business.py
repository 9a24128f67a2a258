"""Business logic exceptions.

Messages of these exceptions are returned to the caller verbatim, so they
must never contain internal details.
"""

from typing import Any

from .base import FeedbackError


class ResourceNotFoundError(FeedbackError):
    """Raised when a requested resource cannot be found."""

    @classmethod
    def for_resource(
        cls, resource: str, field: str, value: Any
    ) -> "ResourceNotFoundError":
        """Build the standard "<Resource> not found with <field>: <value>" error."""
        return cls(
            f"{resource} not found with {field}: {value}",
            details={"resource": resource, "field": field, "value": value},
        )


class InvalidArgumentError(FeedbackError, ValueError):
    """Raised when the caller supplies a semantically invalid value.

    Also a ``ValueError``, so it is classified together with plain
    ``ValueError`` raised by lower layers.
    """

    pass

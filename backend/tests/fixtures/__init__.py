"""Test fixtures and factories."""

from tests.fixtures.apps import FeedbackPayload, create_error_app

__all__ = [
    "FeedbackPayload",
    "create_error_app",
]

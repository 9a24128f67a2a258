"""Centralized exception handler registration for FastAPI apps."""

from typing import TYPE_CHECKING, cast

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as PydanticValidationError
from starlette.exceptions import HTTPException

if TYPE_CHECKING:
    from starlette.types import ExceptionHandler

from feedback_api.exceptions import FieldValidationError, ResourceNotFoundError
from feedback_api.exceptions.handlers import (
    http_exception_handler,
    translate_exception_handler,
)

# FastAPI installs its own RequestValidationError handler; registering it
# here replaces that default. Exception is served by the outermost middleware.
HANDLED_EXCEPTIONS: tuple[type[Exception], ...] = (
    ResourceNotFoundError,
    FieldValidationError,
    RequestValidationError,
    PydanticValidationError,
    ValueError,
    Exception,
)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register the exception translator for the application.

    The classified types all point at the same handler; it classifies the
    failure itself. ``Exception`` is the total fallback for everything else.
    HTTPException replaces FastAPI's default handler and only defers to it
    for routing errors.

    Args:
        app: FastAPI application instance
    """
    for exc_class in HANDLED_EXCEPTIONS:
        app.add_exception_handler(
            exc_class, cast("ExceptionHandler", translate_exception_handler)
        )
    app.add_exception_handler(
        HTTPException, cast("ExceptionHandler", http_exception_handler)
    )


__all__ = ["register_exception_handlers"]

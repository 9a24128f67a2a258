"""Global exception translation for consistent error responses.

Every failure that escapes a request handler is classified into one of four
kinds and turned into an ``ErrorResponse`` with a matching status code:

- ResourceNotFoundError -> 404 "Resource not found"
- field validation failures -> 400 "Validation failed"
- InvalidArgumentError / ValueError -> 400 "Invalid request"
- anything else -> 500 "Internal server error"

An HTTPException raised by endpoint code keeps its own status code and is
labelled by it: 404 as not found, other 4xx as invalid request, 5xx as
internal error. Routing failures (no route, method not allowed) keep the
framework's default body.

Only the last kind hides the original message from the caller; its details
(including chained causes) are logged server-side.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Any

from fastapi import Request, status
from fastapi.exception_handlers import (
    http_exception_handler as default_http_exception_handler,
)
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError as PydanticValidationError
from starlette.exceptions import HTTPException

from feedback_api.exceptions.business import ResourceNotFoundError
from feedback_api.exceptions.validation import FieldValidationError, FieldViolation
from feedback_api.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."

# Location prefixes FastAPI puts in front of request validation errors
REQUEST_PARTS = frozenset({"body", "query", "path", "header", "cookie"})

VALIDATION_ERRORS = (FieldValidationError, RequestValidationError, PydanticValidationError)


class FailureKind(Enum):
    """Failure categories with their HTTP status and response label."""

    NOT_FOUND = (status.HTTP_404_NOT_FOUND, "Resource not found")
    VALIDATION_FAILED = (status.HTTP_400_BAD_REQUEST, "Validation failed")
    INVALID_ARGUMENT = (status.HTTP_400_BAD_REQUEST, "Invalid request")
    UNCLASSIFIED = (status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    def __init__(self, status_code: int, label: str) -> None:
        self.status_code = status_code
        self.label = label


def classify_exception(exc: BaseException) -> FailureKind:
    """Return the failure kind of an exception. First matching rule wins."""
    if isinstance(exc, HTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return FailureKind.NOT_FOUND
        if exc.status_code < status.HTTP_500_INTERNAL_SERVER_ERROR:
            return FailureKind.INVALID_ARGUMENT
        return FailureKind.UNCLASSIFIED
    if isinstance(exc, ResourceNotFoundError):
        return FailureKind.NOT_FOUND
    # Pydantic's ValidationError is a ValueError, so it must be tested first
    if isinstance(exc, VALIDATION_ERRORS):
        return FailureKind.VALIDATION_FAILED
    if isinstance(exc, ValueError):
        return FailureKind.INVALID_ARGUMENT
    return FailureKind.UNCLASSIFIED


def _field_name(loc: Sequence[Any]) -> str:
    parts = list(loc)
    if len(parts) > 1 and parts[0] in REQUEST_PARTS:
        parts = parts[1:]
    return ".".join(str(part) for part in parts)


def extract_field_violations(
    exc: FieldValidationError | RequestValidationError | PydanticValidationError,
) -> list[FieldViolation]:
    """List the field violations of a validation failure in recorded order."""
    if isinstance(exc, FieldValidationError):
        return list(exc.violations)
    return [
        FieldViolation(_field_name(error.get("loc", ())), error.get("msg", ""))
        for error in exc.errors()
    ]


def collect_field_errors(violations: Iterable[FieldViolation]) -> dict[str, str]:
    """Map each field to its first recorded message; later ones are dropped."""
    errors: dict[str, str] = {}
    for field, message in violations:
        if field not in errors:
            errors[field] = message
    return errors


def _unclassified_response(path: str) -> ErrorResponse:
    return ErrorResponse(
        message=FailureKind.UNCLASSIFIED.label,
        error=GENERIC_ERROR_MESSAGE,
        path=path,
    )


def translate_exception(
    exc: BaseException, path: str, log: logging.Logger | None = None
) -> tuple[int, ErrorResponse]:
    """Classify an exception and build the response for it.

    Args:
        exc: The failure raised while handling the request
        path: Request descriptor copied into the response
        log: Logger to report to (defaults to this module's logger)

    Returns:
        Tuple of HTTP status code and error response
    """
    log = log or logger
    kind = classify_exception(exc)
    message = _error_message(exc)
    # FeedbackError details stay server-side, on the log record only
    extra = {"details": getattr(exc, "details", {})}

    if kind is FailureKind.NOT_FOUND:
        log.error(f"Resource not found: {message}", extra=extra)
        error_response = ErrorResponse(message=kind.label, error=message, path=path)
    elif kind is FailureKind.VALIDATION_FAILED:
        log.error(f"Validation failed: {message}", extra=extra)
        error_response = ErrorResponse(
            message=kind.label,
            errors=collect_field_errors(extract_field_violations(exc)),
            path=path,
        )
    elif kind is FailureKind.INVALID_ARGUMENT:
        log.error(f"Invalid argument: {message}", extra=extra)
        error_response = ErrorResponse(message=kind.label, error=message, path=path)
    else:
        # Full traceback server-side only, never in the response
        log.error(f"Unexpected error occurred: {message}", exc_info=exc, extra=extra)
        error_response = _unclassified_response(path)

    if isinstance(exc, HTTPException):
        return exc.status_code, error_response
    return kind.status_code, error_response


def _error_message(exc: BaseException) -> str:
    # str() of an HTTPException prefixes the status code
    if isinstance(exc, HTTPException):
        return str(exc.detail)
    return str(exc)


def is_routing_error(request: Request, exc: HTTPException) -> bool:
    """Whether the router, not endpoint code, raised this HTTPException.

    No route matched (404) or the matched path does not accept the request
    method (405).
    """
    route = request.scope.get("route")
    if route is None:
        return True
    methods = getattr(route, "methods", None)
    return exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED and bool(
        methods and request.method not in methods
    )


async def translate_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """FastAPI exception handler that never raises.

    If building the classified response fails, the secondary failure is
    logged and the generic 500 response is returned instead.
    """
    path = f"uri={request.url.path}"
    try:
        status_code, error_response = translate_exception(exc, path)
    except Exception:
        logger.exception(f"Failed to build error response on {request.url.path}")
        status_code = FailureKind.UNCLASSIFIED.status_code
        error_response = _unclassified_response(path)

    headers = exc.headers if isinstance(exc, HTTPException) else None
    return JSONResponse(
        status_code=status_code,
        content=error_response.to_content(),
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> Response:
    """Translate HTTPExceptions raised by endpoints; leave routing errors alone."""
    if is_routing_error(request, exc):
        return await default_http_exception_handler(request, exc)
    return await translate_exception_handler(request, exc)

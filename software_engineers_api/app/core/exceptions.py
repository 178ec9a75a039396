"""
Application errors and their HTTP mapping.

Domain code raises subclasses of ``ApiError``; it never builds HTTP
responses itself.  ``register_exception_handlers`` installs handlers on
the FastAPI application that turn those errors (plus request validation
errors and anything unexpected) into problem payloads of the form::

    {
        "title": "Entity Not Found",
        "status": 404,
        "detail": "No engineer with id: 5",
        "instance": "/api/v1/software-engineers/5",
        "code": "SOFTWARE_ENGINEER_NOT_FOUND",
        "timestamp": "2025-07-29T11:08:00+00:00"
    }

served with the ``application/problem+json`` media type.
"""

import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

PROBLEM_MEDIA_TYPE = "application/problem+json"


class ErrorCode(str, Enum):
    """Machine readable error categories returned in the ``code`` field."""

    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    SOFTWARE_ENGINEER_NOT_FOUND = "SOFTWARE_ENGINEER_NOT_FOUND"
    VALIDATION_FAILED = "VALIDATION_FAILED"


class ApiError(Exception):
    """Base exception for all errors raised by the service layer."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    title: str = "Internal Server Error"
    code: ErrorCode = ErrorCode.INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class EntityNotFoundError(ApiError):
    """Raised when no software engineer exists for the requested id."""

    status_code = status.HTTP_404_NOT_FOUND
    title = "Entity Not Found"
    code = ErrorCode.SOFTWARE_ENGINEER_NOT_FOUND

    def __init__(self, entity_id: int):
        self.entity_id = entity_id
        super().__init__(
            message=f"No engineer with id: {entity_id}",
            details={"id": entity_id},
        )


def problem_response(
    request: Request,
    status_code: int,
    title: str,
    detail: str,
    code: ErrorCode,
    **extra: Any,
) -> JSONResponse:
    """Build a problem payload response for ``request``."""
    body: Dict[str, Any] = {
        "title": title,
        "status": status_code,
        "detail": detail,
        "instance": request.url.path,
        "code": code.value,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    body.update(extra)
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body),
        media_type=PROBLEM_MEDIA_TYPE,
    )


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    logger.warning("%s at %s: %s", exc.title, request.url.path, exc.message)
    return problem_response(request, exc.status_code, exc.title, exc.message, exc.code)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject malformed input with 400 before any service code runs."""
    errors = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
            "message": err.get("msg", ""),
        }
        for err in exc.errors()
    ]
    logger.info("Validation failed at %s: %s", request.url.path, errors)
    return problem_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "Validation Failed",
        "Request payload is invalid",
        ErrorCode.VALIDATION_FAILED,
        errors=errors,
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Fail-safe handler: log everything, expose nothing but the class name."""
    logger.error(
        "Unhandled exception at %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    return problem_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal Server Error",
        "Unexpected error occurred",
        ErrorCode.INTERNAL_SERVER_ERROR,
        exception=type(exc).__name__,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

"""Error handlers for the FastAPI application.

Every error leaves the API in the same envelope::

    {"error": {"message": ..., "status_code": ..., "details": {...}}}

Calculator validation failures list each violated field under
``details.violations``; formula domain failures come back as 422 with the
offending quantities in ``details``.
"""

import traceback
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from core.exceptions import AppException, DomainError, ValidationError
from core.logger import get_logger

logger = get_logger("core.error_handlers")


def create_error_response(
    message: str,
    status_code: int = 500,
    details: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    """Create a standardized error response.

    Args:
        message: Error message.
        status_code: HTTP status code.
        details: Optional error details dictionary.

    Returns:
        JSONResponse with error details.
    """
    error_body: Dict[str, Any] = {
        "error": {
            "message": message,
            "status_code": status_code,
        }
    }
    if details:
        error_body["error"]["details"] = details
    return JSONResponse(status_code=status_code, content=error_body)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle custom application exceptions."""
    if isinstance(exc, ValidationError):
        logger.info(
            "Rejected input on %s %s: %s",
            request.method,
            request.url.path,
            [v.get("field") for v in exc.violations] or exc.details.get("field"),
        )
    elif isinstance(exc, DomainError):
        logger.warning(
            "Domain error on %s %s: %s %s",
            request.method,
            request.url.path,
            exc.message,
            exc.details,
        )
    else:
        logger.warning(
            "Application error: %s [%s %s]",
            exc.message,
            request.method,
            request.url.path,
        )
    return create_error_response(
        message=exc.message,
        status_code=exc.status_code,
        details=exc.details,
    )


async def request_validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Handle request bodies that could not be parsed into the wire schema.

    This fires before the calculator validator sees the input, e.g. for a
    missing field or a value that cannot be read as a number at all.
    """
    violations = []
    for error in exc.errors():
        violations.append({
            "field": ".".join(str(loc) for loc in error["loc"] if loc != "body"),
            "constraint": error["type"],
            "message": error["msg"],
        })

    logger.info(
        "Unparseable request on %s %s: %s",
        request.method,
        request.url.path,
        violations,
    )
    return create_error_response(
        message="Validation failed",
        status_code=422,
        details={"violations": violations},
    )


async def sqlalchemy_exception_handler(
    request: Request,
    exc: SQLAlchemyError,
) -> JSONResponse:
    """Handle SQLAlchemy database errors without exposing internals."""
    logger.error(
        "Database error on %s %s: %s",
        request.method,
        request.url.path,
        str(exc),
        exc_info=True,
    )
    return create_error_response(
        message="A database error occurred",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        details={"type": "database_error"},
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all unhandled exceptions."""
    logger.error(
        "Unhandled exception on %s %s: %s",
        request.method,
        request.url.path,
        str(exc),
        exc_info=True,
    )
    logger.debug("Traceback: %s", traceback.format_exc())
    return create_error_response(
        message="An internal server error occurred",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        details={"type": "internal_error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    logger.info("Exception handlers registered")

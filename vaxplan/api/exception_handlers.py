"""
Exception handlers for FastAPI application.

Every error leaves the API in the same envelope:
``{"error": true, "message": ..., "details": ..., "status_code": ...}``.
"""

import logging
from typing import Any

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from vaxplan.core.domain import DomainException, EntityNotFoundException

logger = logging.getLogger(__name__)


def _error_response(
    status_code: int,
    message: Any,
    details: Any = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    content: dict[str, Any] = {
        "error": True,
        "message": message,
        "status_code": status_code,
    }
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def _format_errors(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    return [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in errors
    ]


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle HTTPException with consistent response format."""
    http_exc = exc if isinstance(exc, HTTPException) else HTTPException(status_code=500, detail=str(exc))
    return _error_response(http_exc.status_code, http_exc.detail, headers=http_exc.headers)


async def domain_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle domain rule violations.

    EntityNotFoundException maps to 404, every other DomainException to 422.
    """
    if not isinstance(exc, DomainException):
        return _error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, str(exc))

    status_code = (
        status.HTTP_404_NOT_FOUND
        if isinstance(exc, EntityNotFoundException)
        else status.HTTP_422_UNPROCESSABLE_ENTITY
    )
    logger.warning(f"Domain error on {request.url.path}: [{exc.code}] {exc.message}")

    return _error_response(status_code, exc.message, details={"code": exc.code, **exc.details})


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle request validation errors with detailed error messages."""
    if not isinstance(exc, RequestValidationError):
        return _error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, str(exc))

    errors = _format_errors(exc.errors())
    logger.warning(f"Validation error on {request.url.path}: {errors}")

    return _error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, "Validation error", details=errors)


async def pydantic_validation_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle Pydantic validation errors."""
    if not isinstance(exc, ValidationError):
        return _error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, str(exc))

    errors = _format_errors(exc.errors())
    logger.warning(f"Pydantic validation error: {errors}")

    return _error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, "Data validation error", details=errors)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle all unhandled exceptions.

    Logs the full exception with traceback and returns a safe error response.
    """
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc!s}",
        exc_info=True,
    )

    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ValidationError, pydantic_validation_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    logger.info("Exception handlers registered")

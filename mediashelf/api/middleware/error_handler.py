"""
Error Handler Middleware

Global exception handling for the API.

Provides consistent error responses across all endpoints by catching
exceptions and converting them to the error envelope.

Error Response Format:
======================
    {
        "success": false,
        "error": {
            "code": "NOT_FOUND",
            "message": "User with id '7' not found",
            "details": {}
        }
    }

Exception Handling:
===================
1. MediashelfException subclasses → their status_code and to_dict()
2. RequestValidationError          → 400 VALIDATION_ERROR, details.errors
3. Pydantic ValidationError        → 400 VALIDATION_ERROR, details.errors
4. Starlette HTTPException         → its status (unknown route, bad method)
5. Other exceptions                → 500 INTERNAL_ERROR (details hidden)

Usage:
======
    from mediashelf.api.middleware.error_handler import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from typing import Any, Iterable

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from mediashelf.shared.core.exceptions import MediashelfException
from mediashelf.shared.core.logging import logger
from mediashelf.shared.schemas.common import ErrorDetail, ErrorResponse


HTTP_ERROR_CODES = {
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}


def format_validation_errors(errors: Iterable[dict[str, Any]]) -> list[str]:
    """
    Flatten pydantic error dicts into "field: message" strings.

    The leading "body"/"query"/"path" location part is dropped.

    Example:
        [{"loc": ("body", "score"), "msg": "Input should be less than or equal to 5"}]
        → ["score: Input should be less than or equal to 5"]
    """
    messages = []
    for error in errors:
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        message = error.get("msg", "Invalid value")
        messages.append(f"{'.'.join(location)}: {message}" if location else message)
    return messages


def _error_content(code: str, message: str, details: dict[str, Any] | None = None) -> dict[str, Any]:
    return ErrorResponse(error=ErrorDetail(code=code, message=message, details=details or {})).model_dump()


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Set up global exception handlers.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(MediashelfException)
    async def mediashelf_exception_handler(
        request: Request,
        exc: MediashelfException,
    ) -> JSONResponse:
        """
        Handle application exceptions.

        All custom exceptions inherit from MediashelfException and include:
        - status_code: HTTP status code
        - error_code: Machine-readable error code
        - message: Human-readable message
        - details: Additional context
        """
        logger.warning(
            "Application error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """
        Handle request validation errors.

        These occur when the body, query or path parameters don't match the
        declared schema, e.g. a score of 6 or a path id of 0.
        """
        errors = format_validation_errors(exc.errors())
        logger.warning(
            "Request validation error",
            errors=errors,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=400,
            content=_error_content("VALIDATION_ERROR", "Request validation failed", {"errors": errors}),
        )

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: ValidationError,
    ) -> JSONResponse:
        """
        Handle Pydantic validation errors raised inside handlers or services.
        """
        errors = format_validation_errors(exc.errors())
        logger.warning(
            "Validation error",
            errors=errors,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=400,
            content=_error_content("VALIDATION_ERROR", "Validation failed", {"errors": errors}),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """Wrap routing errors (unknown path, wrong method) in the error envelope."""
        logger.info(
            "HTTP error",
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_content(HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR"), str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle unexpected exceptions.

        Full error details are logged but not exposed to clients.
        """
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content=_error_content("INTERNAL_ERROR", "An unexpected error occurred"),
        )

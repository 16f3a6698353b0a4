"""Error Handlers — map exceptions raised under a request to the JSON error envelope.

Invariants:
    - OnlineShopError answers its own http_status with exc.to_response()
    - RequestValidationError (body, path, malformed JSON) answers 400 with one detail per failing field
    - Any other exception answers 500 with a fixed message; the real cause only reaches the logs

Design Decisions:
    - Handlers are plain module functions so tests and main.py share one registration call
    - 4xx domain errors log at warning, 5xx at error
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from onlineshop.core.errors import ErrorCategory, ErrorSeverity, OnlineShopError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Attach the domain, validation and catch-all handlers to the app."""
    app.add_exception_handler(OnlineShopError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


async def handle_domain_error(request: Request, exc: OnlineShopError) -> JSONResponse:
    level = logging.WARNING if exc.http_status < 500 else logging.ERROR
    logger.log(
        level,
        f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "method": request.method,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_validation_error(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    logger.warning(
        f"Rejected {request.method} {request.url.path}: {exc.errors()}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR,
            details=[_field_detail(e) for e in exc.errors()],
        ),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}",
        exc_info=exc,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )


def _error_body(
    code: str, message: str, category: ErrorCategory, severity: ErrorSeverity,
    details: list[dict] | None = None,
) -> dict:
    error = {
        "code": code,
        "message": message,
        "category": category.value,
        "severity": severity.value,
    }
    if details is not None:
        error["details"] = details
    return {"error": error}


def _field_detail(error: dict) -> dict:
    return {
        "field": ".".join(str(loc) for loc in error["loc"]),
        "message": error["msg"],
        "type": error["type"],
    }

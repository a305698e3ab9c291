"""Error Handlers — translate invoice errors into the JSON error envelope.

Invariants:
    - BillableError → its own http_status and to_response() body
    - RequestValidationError → 400 VALIDATION_ERROR listing the offending body/path fields
    - Anything else → 500 INTERNAL_ERROR without internal details

Design Decisions:
    - 4xx domain errors log at WARNING (caller mistakes), 5xx at ERROR
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from app.core.errors import BillableError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(BillableError, _handle_billable_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)


async def _handle_billable_error(request: Request, exc: BillableError):
    level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
    logger.log(
        level,
        f"{request.method} {request.url.path} failed: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "invoice_id": exc.context.invoice_id,
            "user_id": exc.context.user_id,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def _handle_validation_error(request: Request, exc: RequestValidationError):
    fields = [_field_path(e["loc"]) for e in exc.errors()]
    logger.warning(
        f"Rejected invoice payload on {request.url.path}: {', '.join(fields)}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Invalid invoice data",
                "category": ErrorCategory.VALIDATION.value,
                "severity": ErrorSeverity.ERROR.value,
                "details": [
                    {"field": field, "message": e["msg"]}
                    for field, e in zip(fields, exc.errors())
                ],
            },
        },
    )


async def _handle_unexpected_error(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc}",
        exc_info=True,
        extra={"path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
                "category": ErrorCategory.INTERNAL.value,
                "severity": ErrorSeverity.CRITICAL.value,
            },
        },
    )


def _field_path(loc) -> str:
    """'body.items.0.quantity' → 'items.0.quantity'; path params keep their name."""
    parts = [str(p) for p in loc]
    if parts and parts[0] in ("body", "path", "query", "header"):
        parts = parts[1:]
    return ".".join(parts)

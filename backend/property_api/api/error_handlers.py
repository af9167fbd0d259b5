"""Error Handlers — global exception handlers for the property API.

Invariants:
    - PropertyApiError → its http_status with structured JSON (code, message, severity)
    - RequestValidationError → 400; message and details say whether the id or the
      payload was rejected
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (PropertyApiError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py: keeps the app factory short
"""

import logging
from typing import Sequence

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from property_api.core.errors import ErrorCategory, ErrorSeverity, PropertyApiError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register property API domain/infrastructure error handler."""

    @app.exception_handler(PropertyApiError)
    async def property_api_error_handler(request: Request, exc: PropertyApiError):
        """Handle all property API domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"PropertyApiError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "request_id": exc.context.request_id,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register request validation handler (path ids and listing bodies)."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Malformed id, header or listing payload → 400."""
        errors = exc.errors()
        logger.warning(
            f"Rejected {request.method} {request.url.path}: "
            f"{len(errors)} invalid field(s)",
            extra={
                "error_code": "VALIDATION_ERROR",
                "path": request.url.path,
                "request_id": request.headers.get("x-request-id"),
            },
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(errors),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Anything not translated to PropertyApiError: 500, no internals."""
        logger.error(
            f"Unhandled {type(exc).__name__} on "
            f"{request.method} {request.url.path}",
            exc_info=exc,
            extra={
                "error_code": "INTERNAL_ERROR",
                "path": request.url.path,
                "request_id": request.headers.get("x-request-id"),
            },
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "The property request could not be completed",
                    "category": ErrorCategory.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


# Where FastAPI found the bad input → how the client should read it
_SOURCE_LABELS = {
    "path": "property id",
    "body": "property payload",
    "query": "query parameter",
    "header": "request header",
}


def _build_validation_error_response(errors: Sequence[dict]) -> dict:
    """Envelope naming the rejected input (id vs payload) and each bad field."""
    sources = sorted({str(e["loc"][0]) for e in errors if e["loc"]})
    labels = [_SOURCE_LABELS.get(source, source) for source in sources]
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": f"Invalid {' and '.join(labels) or 'request'}",
            "category": ErrorCategory.VALIDATION.value,
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "in": str(e["loc"][0]) if e["loc"] else "request",
                    "field": ".".join(str(loc) for loc in e["loc"][1:]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in errors
            ],
        },
    }

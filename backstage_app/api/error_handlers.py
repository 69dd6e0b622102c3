"""Error Handlers — global exception handlers for the Backstage App API.

Invariants:
    - BackstageAppError → its own flat envelope and http_status
    - Unmatched route (404) and wrong method (405) → EndpointNotFoundError envelope (404)
    - RequestValidationError → 400 InvalidRequestBodyError envelope with field details
    - No handler here ever echoes a stack trace or exception internals

Design Decisions:
    - Three-layer handler: domain (BackstageAppError), routing (HTTPException),
      validation (Pydantic); faults are caught by ErrorHandlerMiddleware instead
    - 405 folded into 404: a known path with an unknown method is unmatched
"""

import logging
from typing import Any, Iterable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from backstage_app.core.errors import (
    BackstageAppError, EndpointNotFoundError, ErrorSeverity,
    InvalidRequestBodyError,
)

logger = logging.getLogger(__name__)

_SEVERITY_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_app_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)


def original_url(request: Request) -> str:
    """Path plus query string, as the client sent it (percent-encoding kept)."""
    raw_path = request.scope.get("raw_path")
    if raw_path:
        path = raw_path.decode("latin-1").split("?", 1)[0]
    else:
        path = request.scope["path"]
    query = request.scope.get("query_string", b"").decode("latin-1")
    return f"{path}?{query}" if query else path


def format_validation_details(errors: Iterable[dict[str, Any]]) -> list[dict[str, str]]:
    """Flatten pydantic error dicts into {field, message, type} entries."""
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in errors
    ]


def _app_error_response(request: Request, exc: BackstageAppError) -> JSONResponse:
    logger.log(
        _SEVERITY_LEVELS[exc.severity],
        f"{type(exc).__name__}: {exc.message}",
        extra={
            "error_code": exc.code,
            "error_category": exc.category.value,
            "path": request.url.path,
            "method": request.method,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _register_app_error_handler(app: FastAPI) -> None:
    """Register domain error handler."""

    @app.exception_handler(BackstageAppError)
    async def app_error_handler(request: Request, exc: BackstageAppError):
        return _app_error_response(request, exc)


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing/HTTP error handler."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (
            status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
        ):
            return _app_error_response(
                request, EndpointNotFoundError(original_url(request), request.method),
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        return _app_error_response(
            request, InvalidRequestBodyError(format_validation_details(exc.errors())),
        )

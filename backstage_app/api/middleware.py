"""HTTP Middleware — security headers, CORS, access log, fault barrier.

Invariants:
    - install_middleware applies, outermost first: security headers, CORS,
      access log, fault barrier, trailing-slash normalization
    - Security headers never overwrite a header the handler already set
    - Every request produces exactly one access-log line, 500s included
    - Logged and echoed URLs are the raw request target, percent-encoding intact
    - Fault responses expose the exception text only in development mode

Design Decisions:
    - BaseHTTPMiddleware subclasses: one dispatch() per concern, ordered by add_middleware
    - Fault barrier sits inside the headers/CORS/log chain so the 500 still passes through it
"""

import logging
import time
from typing import Callable

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from backstage_app.api.error_handlers import original_url
from backstage_app.config import Settings
from backstage_app.core.errors import ErrorCategory

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("backstage_app.access")

SECURITY_HEADERS: dict[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "X-XSS-Protection": "0",
    "X-DNS-Prefetch-Control": "off",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Opener-Policy": "same-origin",
}

FAULT_ERROR = "Something went wrong!"
FAULT_MESSAGE = "Internal server error"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add conventional hardening headers to every response."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response


class AccessLogMiddleware(BaseHTTPMiddleware):
    """One combined-format line per request on the access logger."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - started) * 1000, 3)

        client = request.client.host if request.client else "-"
        url = original_url(request)
        access_logger.info(
            '%s - "%s %s HTTP/%s" %d %s "%s" "%s" %.3fms',
            client,
            request.method,
            url,
            request.scope.get("http_version", "1.1"),
            response.status_code,
            response.headers.get("content-length", "-"),
            request.headers.get("referer", "-"),
            request.headers.get("user-agent", "-"),
            duration_ms,
            extra={
                "client": client,
                "method": request.method,
                "path": url,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        return response


class TrailingSlashMiddleware(BaseHTTPMiddleware):
    """Route `/health/` as `/health`: one trailing slash is optional, never redirected."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        path = request.scope["path"]
        if len(path) > 1 and path.endswith("/"):
            request.scope["path"] = path[:-1]
        return await call_next(request)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Catch unhandled exceptions, log them, answer with a generic 500."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(
                f"Unhandled exception on {request.url.path}: {exc}",
                exc_info=True,
                extra={
                    "error_code": "INTERNAL_ERROR",
                    "error_category": ErrorCategory.INTERNAL.value,
                    "path": request.url.path,
                    "method": request.method,
                },
            )
            settings: Settings = request.app.state.settings
            return JSONResponse(
                status_code=500,
                content={
                    "error": FAULT_ERROR,
                    "message": str(exc) if settings.is_development else FAULT_MESSAGE,
                },
            )


def setup_cors(app: FastAPI, origins: list[str]) -> None:
    """Permit cross-origin requests from the configured origins ("*" = any)."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def install_middleware(app: FastAPI, settings: Settings) -> None:
    """Add the middleware chain. Starlette runs the last-added one first."""
    app.add_middleware(TrailingSlashMiddleware)
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(AccessLogMiddleware)
    setup_cors(app, settings.cors_origins)
    app.add_middleware(SecurityHeadersMiddleware)

"""Backstage App — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BackstageAppError / routing / validation errors
      → flat JSON envelopes; faults handled by ErrorHandlerMiddleware
    - Middleware order, outermost first: security headers, CORS, access log,
      fault barrier, trailing-slash normalization
    - Settings live on app.state.settings; handlers read them through a dependency

Design Decisions:
    - create_app(settings) factory: tests build apps with their own Settings
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Interactive docs disabled: every path outside the route table answers 404
    - redirect_slashes off: a trailing slash is stripped by TrailingSlashMiddleware,
      anything it does not match answers 404 instead of a 307
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from backstage_app.api.error_handlers import register_error_handlers
from backstage_app.api.middleware import install_middleware
from backstage_app.api.routes import health, root, services, users
from backstage_app.config import Settings, get_settings
from backstage_app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    port = app.state.settings.port
    logger.info(f"Server is running on port {port}")
    logger.info(f"Health check available at http://localhost:{port}/health")
    logger.info(f"API documentation at http://localhost:{port}/api")
    yield
    logger.info("Backstage App shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build a configured FastAPI application."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)

    app = FastAPI(
        title="Backstage App",
        version=settings.service_version,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.state.settings = settings

    install_middleware(app, settings)

    # Routes — explicit registration
    app.include_router(root.router)
    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(services.router)

    register_error_handlers(app)
    return app


app = create_app()

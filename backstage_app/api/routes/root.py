"""Root & API Info — service banner and endpoint directory.

Invariants:
    - GET / lists exactly the route groups in PUBLIC_ENDPOINTS
    - GET / and GET /api report the same version
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from backstage_app.api.dependencies import get_app_settings
from backstage_app.api.routes import READ_METHODS
from backstage_app.config import Settings
from backstage_app.core.catalog import PUBLIC_ENDPOINTS
from backstage_app.schemas.status import ApiInfoResponse, RootResponse

router = APIRouter(tags=["root"])


@router.api_route(
    "/", methods=READ_METHODS, response_model=RootResponse,
)
async def root(settings: Settings = Depends(get_app_settings)):
    """Welcome banner with the endpoint directory."""
    return RootResponse(
        message="Welcome to Backstage App",
        version=settings.service_version,
        timestamp=datetime.now(timezone.utc),
        endpoints=dict(PUBLIC_ENDPOINTS),
    )


@router.api_route(
    "/api", methods=READ_METHODS, response_model=ApiInfoResponse,
)
async def api_info(settings: Settings = Depends(get_app_settings)):
    return ApiInfoResponse(
        message="API is running",
        version=settings.service_version,
        documentation=settings.documentation_url,
    )

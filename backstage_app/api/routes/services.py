"""Service Catalog Routes — listing, synthesized detail, and (unpersisted) creation.

Invariants:
    - GET /api/services/{id} accepts any non-empty segment and echoes it back
    - POST /api/services never stores anything: a later GET does not see it
    - Missing/empty name or version → 400 {"error": "Name and version are required"}
    - Detail metrics come from the injected ServiceMetricsGenerator only
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status

from backstage_app.api.dependencies import decode_service_create, get_service_metrics
from backstage_app.api.routes import READ_METHODS
from backstage_app.core.capabilities import ServiceMetricsGenerator
from backstage_app.core.catalog import (
    SERVICES, build_created_service, build_service_detail,
)
from backstage_app.schemas.service import (
    ServiceCreate, ServiceDetailResponse, ServiceListResponse,
    ServiceSummaryResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/services", tags=["services"])


@router.api_route(
    "", methods=READ_METHODS, response_model=ServiceListResponse,
)
async def list_services():
    services = [ServiceSummaryResponse.model_validate(s) for s in SERVICES]
    return ServiceListResponse(
        services=services,
        total=len(services),
        timestamp=datetime.now(timezone.utc),
    )


@router.api_route(
    "/{service_id}", methods=READ_METHODS, response_model=ServiceDetailResponse,
)
async def get_service(
    service_id: str,
    metrics: ServiceMetricsGenerator = Depends(get_service_metrics),
):
    """Synthesize a running service for whatever id was asked for."""
    detail = build_service_detail(
        service_id, metrics.generate(), datetime.now(timezone.utc),
    )
    return ServiceDetailResponse.model_validate(detail)


@router.post(
    "", response_model=ServiceSummaryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_service(payload: ServiceCreate = Depends(decode_service_create)):
    """Accept a deployment request and report it as deploying."""
    created = build_created_service(
        payload.name, payload.version, datetime.now(timezone.utc),
    )
    logger.info(f"Service deployment requested: {created.id} {created.version}")
    return ServiceSummaryResponse.model_validate(created)

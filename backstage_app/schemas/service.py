"""Service Schemas — Pydantic models for the service catalog endpoints.

Invariants:
    - ServiceCreate fields are optional here: presence is checked by the
      catalog builder so a missing field yields the domain 400, not a schema error
    - ServiceCreate accepts only strings; other JSON types fail body decoding
    - ServiceDetailResponse is a strict superset of ServiceSummaryResponse
"""

from datetime import datetime

from backstage_app.core.domain_types import ServiceStatus
from backstage_app.schemas.common import CamelModel


class ServiceCreate(CamelModel):
    """POST /api/services body."""
    name: str | None = None
    version: str | None = None


class ServiceSummaryResponse(CamelModel):
    id: str
    name: str
    status: ServiceStatus
    version: str
    last_deployed: datetime


class ServiceMetricsResponse(CamelModel):
    requests: int
    errors: int
    response_time_ms: int


class ServiceDetailResponse(ServiceSummaryResponse):
    """GET /api/services/{id} payload."""
    endpoints: list[str]
    dependencies: list[str]
    metrics: ServiceMetricsResponse


class ServiceListResponse(CamelModel):
    """GET /api/services payload."""
    services: list[ServiceSummaryResponse]
    total: int
    timestamp: datetime

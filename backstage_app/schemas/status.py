"""Status Schemas — root, API info, health, and api-status payloads.

Invariants:
    - Every payload with a `timestamp` carries the response-construction time
    - HealthResponse.status is always "healthy" (liveness, not readiness)
    - Pod and git fields are null when the corresponding env var is unset
"""

from datetime import datetime
from typing import Literal

from backstage_app.schemas.common import CamelModel


class RootResponse(CamelModel):
    """GET / payload."""
    message: str
    version: str
    timestamp: datetime
    endpoints: dict[str, str]


class ApiInfoResponse(CamelModel):
    """GET /api payload."""
    message: str
    version: str
    documentation: str


class MemoryUsageResponse(CamelModel):
    rss_bytes: int
    peak_rss_bytes: int | None
    gc_pending: int
    gc_collections: int


class HealthResponse(CamelModel):
    """GET /health payload."""
    status: Literal["healthy"] = "healthy"
    uptime: float
    timestamp: datetime
    memory: MemoryUsageResponse
    version: str
    environment: str


class ServiceStatusInfo(CamelModel):
    name: str
    version: str
    status: Literal["running"] = "running"
    uptime: float
    timestamp: datetime
    environment: str
    port: int


class PodInfo(CamelModel):
    name: str | None = None
    namespace: str | None = None
    ip: str | None = None
    node: str | None = None


class GitInfo(CamelModel):
    commit: str | None = None
    branch: str | None = None
    repository: str | None = None


class SystemInfo(CamelModel):
    platform: str
    architecture: str
    python_version: str
    cpu_count: int | None
    memory: MemoryUsageResponse


class ApiStatusResponse(CamelModel):
    """GET /api-status payload."""
    service: ServiceStatusInfo
    pod: PodInfo
    system: SystemInfo
    git: GitInfo
    endpoints: dict[str, str]
    response_time: float

"""Health & Status Probes — liveness and extended status for container orchestration.

Invariants:
    - GET /health always returns 200 with status "healthy" if the process is up
    - GET /api-status returns 200 with service, pod, system, git blocks
    - Runtime figures come from the injected RuntimeMetricsProvider only
    - responseTime is the milliseconds spent assembling the status payload

Design Decisions:
    - No readiness probe: the service has no downstream dependency to check
"""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from backstage_app.api.dependencies import get_app_settings, get_runtime_metrics
from backstage_app.api.routes import READ_METHODS
from backstage_app.config import Settings
from backstage_app.core.capabilities import RuntimeMetricsProvider
from backstage_app.core.catalog import PUBLIC_ENDPOINTS
from backstage_app.schemas.status import (
    ApiStatusResponse, GitInfo, HealthResponse, MemoryUsageResponse, PodInfo,
    ServiceStatusInfo, SystemInfo,
)

router = APIRouter(tags=["health"])


@router.api_route(
    "/health", methods=READ_METHODS, response_model=HealthResponse,
)
async def health_check(
    settings: Settings = Depends(get_app_settings),
    runtime: RuntimeMetricsProvider = Depends(get_runtime_metrics),
):
    """Basic liveness probe. Returns 200 if the process is up."""
    return HealthResponse(
        uptime=runtime.uptime_seconds(),
        timestamp=datetime.now(timezone.utc),
        memory=MemoryUsageResponse.model_validate(runtime.memory_usage()),
        version=runtime.runtime_version(),
        environment=settings.environment,
    )


@router.api_route(
    "/api-status", methods=READ_METHODS, response_model=ApiStatusResponse,
)
async def api_status(
    settings: Settings = Depends(get_app_settings),
    runtime: RuntimeMetricsProvider = Depends(get_runtime_metrics),
):
    """Extended status — service identity, pod placement, host, build."""
    started = time.perf_counter()

    service = ServiceStatusInfo(
        name=settings.service_name,
        version=settings.service_version,
        uptime=runtime.uptime_seconds(),
        timestamp=datetime.now(timezone.utc),
        environment=settings.environment,
        port=settings.port,
    )
    pod = PodInfo(
        name=settings.pod_name or settings.hostname,
        namespace=settings.pod_namespace,
        ip=settings.pod_ip,
        node=settings.node_name,
    )
    platform_info = runtime.platform_info()
    system = SystemInfo(
        platform=platform_info.platform,
        architecture=platform_info.architecture,
        python_version=platform_info.python_version,
        cpu_count=platform_info.cpu_count,
        memory=MemoryUsageResponse.model_validate(runtime.memory_usage()),
    )
    git = GitInfo(
        commit=settings.git_commit,
        branch=settings.git_branch,
        repository=settings.git_repository,
    )

    return ApiStatusResponse(
        service=service,
        pod=pod,
        system=system,
        git=git,
        endpoints=dict(PUBLIC_ENDPOINTS),
        response_time=(time.perf_counter() - started) * 1000,
    )

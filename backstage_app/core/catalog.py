"""Catalog — the fixed users/services data set and per-request entry builders.

Invariants:
    - USERS and SERVICES are immutable tuples of frozen records, built once at import
    - Builders never read the clock or RNG: `now` and metrics arrive as arguments
    - Nothing built here is stored; a created service is not visible to later GETs
    - PUBLIC_ENDPOINTS lists exactly the route groups the router registers

Design Decisions:
    - Frozen dataclasses over dicts: concurrent handlers share them without copying
    - Schemas convert from these records (from_attributes), core stays framework-free
"""

from dataclasses import dataclass
from datetime import datetime, timezone

from backstage_app.core.domain_types import (
    ServiceId, ServiceStatus, UserId, UserRole,
)
from backstage_app.core.errors import RequiredFieldsError
from backstage_app.core.naming import display_name_from_id, slugify_service_name


@dataclass(frozen=True)
class UserRecord:
    id: UserId
    name: str
    email: str
    role: UserRole


@dataclass(frozen=True)
class ServiceSummary:
    id: ServiceId
    name: str
    status: ServiceStatus
    version: str
    last_deployed: datetime


@dataclass(frozen=True)
class ServiceMetrics:
    """Synthetic traffic figures attached to a service detail."""
    requests: int
    errors: int
    response_time_ms: int


@dataclass(frozen=True)
class ServiceDetail(ServiceSummary):
    endpoints: tuple[str, ...]
    dependencies: tuple[str, ...]
    metrics: ServiceMetrics


# ─── Static data ─────────────────────────────────────────────────

USERS: tuple[UserRecord, ...] = (
    UserRecord(UserId(1), "John Doe", "john@example.com", UserRole.DEVELOPER),
    UserRecord(UserId(2), "Jane Smith", "jane@example.com", UserRole.DESIGNER),
    UserRecord(UserId(3), "Bob Johnson", "bob@example.com", UserRole.MANAGER),
)

SERVICES: tuple[ServiceSummary, ...] = (
    ServiceSummary(
        ServiceId("user-service"), "User Service", ServiceStatus.RUNNING,
        "1.2.0", datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc),
    ),
    ServiceSummary(
        ServiceId("auth-service"), "Authentication Service", ServiceStatus.RUNNING,
        "2.1.0", datetime(2024, 1, 14, 15, 45, tzinfo=timezone.utc),
    ),
    ServiceSummary(
        ServiceId("notification-service"), "Notification Service",
        ServiceStatus.MAINTENANCE,
        "1.5.2", datetime(2024, 1, 13, 9, 20, tzinfo=timezone.utc),
    ),
)

PUBLIC_ENDPOINTS: dict[str, str] = {
    "health": "/health",
    "apiStatus": "/api-status",
    "api": "/api",
    "users": "/api/users",
    "services": "/api/services",
}

DETAIL_VERSION = "1.0.0"
DETAIL_DEPENDENCIES: tuple[str, ...] = ("database", "redis")


# ─── Builders ────────────────────────────────────────────────────

def build_service_detail(
    service_id: str, metrics: ServiceMetrics, now: datetime,
) -> ServiceDetail:
    """Synthesize a detail record for any id. The id is echoed unvalidated."""
    return ServiceDetail(
        id=ServiceId(service_id),
        name=display_name_from_id(service_id),
        status=ServiceStatus.RUNNING,
        version=DETAIL_VERSION,
        last_deployed=now,
        endpoints=(
            f"https://{service_id}.example.com/api",
            f"https://{service_id}.example.com/health",
        ),
        dependencies=DETAIL_DEPENDENCIES,
        metrics=metrics,
    )


def build_created_service(
    name: str | None, version: str | None, now: datetime,
) -> ServiceSummary:
    """Validate presence of name/version and build a 'deploying' summary.

    Raises RequiredFieldsError when either field is missing or empty.
    """
    if not name or not version:
        raise RequiredFieldsError(["name", "version"])
    return ServiceSummary(
        id=slugify_service_name(name),
        name=name,
        status=ServiceStatus.DEPLOYING,
        version=version,
        last_deployed=now,
    )

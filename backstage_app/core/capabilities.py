"""Boundary Protocols — contracts for the ambient reads handlers depend on.

Invariants:
    - Core NEVER imports from infrastructure — dependency arrows point inward only
    - Process introspection and randomness accessed only through these Protocols
    - Implementations provided by the API layer via FastAPI dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
"""

from dataclasses import dataclass
from typing import Protocol

from backstage_app.core.catalog import ServiceMetrics


@dataclass(frozen=True)
class MemorySnapshot:
    rss_bytes: int
    peak_rss_bytes: int | None
    gc_pending: int
    gc_collections: int


@dataclass(frozen=True)
class PlatformInfo:
    platform: str
    architecture: str
    python_version: str
    cpu_count: int | None


class RuntimeMetricsProvider(Protocol):
    """Read-only view of the running process."""
    def uptime_seconds(self) -> float: ...
    def memory_usage(self) -> MemorySnapshot: ...
    def runtime_version(self) -> str: ...
    def platform_info(self) -> PlatformInfo: ...


class ServiceMetricsGenerator(Protocol):
    """Source of the synthetic metrics attached to service details."""
    def generate(self) -> ServiceMetrics: ...

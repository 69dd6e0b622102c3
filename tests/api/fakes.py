"""Test Doubles — deterministic capabilities and app/settings builders for route tests.

Invariants:
    - FakeRuntimeMetrics and FixedServiceMetrics satisfy the core Protocols structurally
    - make_settings() never reads .env and nulls every pod/git variable unless overridden
    - build_app() adds a /boom route that raises a plain RuntimeError
"""

from backstage_app.api.dependencies import get_runtime_metrics, get_service_metrics
from backstage_app.config import Settings
from backstage_app.core.capabilities import MemorySnapshot, PlatformInfo
from backstage_app.core.catalog import ServiceMetrics
from backstage_app.main import create_app

FAKE_UPTIME = 42.5
FAKE_MEMORY = MemorySnapshot(
    rss_bytes=41_943_040, peak_rss_bytes=52_428_800, gc_pending=12,
    gc_collections=7,
)
FAKE_RUNTIME_VERSION = "CPython 3.12.0"
FAKE_PLATFORM = PlatformInfo(
    platform="linux", architecture="x86_64", python_version="3.12.0", cpu_count=4,
)
FIXED_METRICS = ServiceMetrics(requests=321, errors=2, response_time_ms=87)
BOOM_MESSAGE = "metrics backend exploded"


class FakeRuntimeMetrics:
    def uptime_seconds(self) -> float:
        return FAKE_UPTIME

    def memory_usage(self) -> MemorySnapshot:
        return FAKE_MEMORY

    def runtime_version(self) -> str:
        return FAKE_RUNTIME_VERSION

    def platform_info(self) -> PlatformInfo:
        return FAKE_PLATFORM


class FixedServiceMetrics:
    def generate(self) -> ServiceMetrics:
        return FIXED_METRICS


def make_settings(**overrides) -> Settings:
    values = {
        "environment": "test",
        "log_format": "text",
        "pod_name": None,
        "hostname": None,
        "pod_namespace": None,
        "pod_ip": None,
        "node_name": None,
        "git_commit": None,
        "git_branch": None,
        "git_repository": None,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def build_app(settings: Settings):
    app = create_app(settings)
    app.dependency_overrides[get_runtime_metrics] = FakeRuntimeMetrics
    app.dependency_overrides[get_service_metrics] = FixedServiceMetrics

    async def boom():
        raise RuntimeError(BOOM_MESSAGE)

    app.add_api_route("/boom", boom, methods=["GET"])
    return app

"""Process Runtime Metrics — uptime, memory, and interpreter info for health probes.

Invariants:
    - Uptime measured from module import (first import happens at process start)
    - Uptime is monotonic: wall-clock adjustments never make it go backwards
    - Memory snapshot is read fresh on every call; nothing is cached
    - rss_bytes is current resident memory; peak RSS stands in only where
      the current figure cannot be read (no /proc)
    - A snapshot costs O(1): it never walks the heap

Design Decisions:
    - stdlib /proc + `resource` + `gc` over a process-inspection library: current
      and peak RSS plus GC counters are enough for a liveness payload
    - `resource` is Unix-only; on Windows peak RSS is reported as null
"""

import gc
import os
import platform
import sys
import time

if sys.platform == "win32":
    resource = None
else:
    import resource

from backstage_app.core.capabilities import MemorySnapshot, PlatformInfo

_PROCESS_STARTED = time.monotonic()
_STATM_PATH = "/proc/self/statm"


def _current_rss_bytes() -> int | None:
    """Resident set size right now, from /proc; None where /proc is absent."""
    try:
        with open(_STATM_PATH) as statm:
            resident_pages = int(statm.read().split()[1])
    except OSError:
        return None
    return resident_pages * os.sysconf("SC_PAGE_SIZE")


def _peak_rss_bytes() -> int | None:
    if resource is None:
        return None
    max_rss = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    # ru_maxrss is kilobytes on Linux, bytes on macOS
    if sys.platform != "darwin":
        max_rss *= 1024
    return max_rss


class ProcessRuntimeMetrics:
    """RuntimeMetricsProvider backed by the current interpreter process."""

    def __init__(self, started_at: float = _PROCESS_STARTED):
        self._started_at = started_at

    def uptime_seconds(self) -> float:
        return time.monotonic() - self._started_at

    def memory_usage(self) -> MemorySnapshot:
        peak = _peak_rss_bytes()
        current = _current_rss_bytes()
        if current is None:
            current = peak or 0
        return MemorySnapshot(
            rss_bytes=current,
            peak_rss_bytes=peak,
            gc_pending=sum(gc.get_count()),
            gc_collections=sum(s["collections"] for s in gc.get_stats()),
        )

    def runtime_version(self) -> str:
        return f"{platform.python_implementation()} {platform.python_version()}"

    def platform_info(self) -> PlatformInfo:
        return PlatformInfo(
            platform=sys.platform,
            architecture=platform.machine(),
            python_version=platform.python_version(),
            cpu_count=os.cpu_count(),
        )

"""Random Service Metrics — synthetic traffic numbers for service detail responses.

Invariants:
    - requests in [0, 999], errors in [0, 9], response_time_ms in [50, 249]
    - Values carry no relation to real traffic and are never stored
"""

import random

from backstage_app.core.catalog import ServiceMetrics

REQUESTS_RANGE = (0, 999)
ERRORS_RANGE = (0, 9)
RESPONSE_TIME_MS_RANGE = (50, 249)


class RandomServiceMetrics:
    """ServiceMetricsGenerator drawing uniform integers from a Random instance."""

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng or random.Random()

    def generate(self) -> ServiceMetrics:
        return ServiceMetrics(
            requests=self._rng.randint(*REQUESTS_RANGE),
            errors=self._rng.randint(*ERRORS_RANGE),
            response_time_ms=self._rng.randint(*RESPONSE_TIME_MS_RANGE),
        )

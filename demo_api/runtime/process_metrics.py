"""Process runtime metrics backed by the monotonic clock."""

from __future__ import annotations

import time
from typing import Callable

from demo_api.domain import RuntimeMetricsPort


class ProcessRuntimeMetrics(RuntimeMetricsPort):
    """Runtime metrics measured from the instant this object was created.

    Build one instance at process start and share it for the life of the
    process so uptime reflects process age rather than request age.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        """Initialize metrics source and record the start instant.

        Args:
            clock: Monotonic seconds clock, injectable for tests.

        Raises:
            ValueError: Raised when clock is None.
        """

        if clock is None:
            raise ValueError("clock must not be None")
        self._clock = clock
        self._started_at = clock()

    def runtime_uptime_ms(self) -> int:
        """Return elapsed milliseconds since construction.

        Returns:
            int: Non-negative uptime in milliseconds.

        Raises:
            RuntimeError: Raised when the clock cannot be read.
        """

        elapsed_seconds = self._clock() - self._started_at
        return max(0, int(elapsed_seconds * 1000))

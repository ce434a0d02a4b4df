"""Point-in-time health reporting wrapped in the response envelope."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Final, Protocol

from .envelope import Envelope, envelope_build

logger = logging.getLogger(__name__)

HEALTH_STATUS_UP: Final[str] = "UP"
HEALTH_STATUS_DOWN: Final[str] = "DOWN"
HEALTH_HTTP_STATUS_UP: Final[int] = 200
HEALTH_HTTP_STATUS_DOWN: Final[int] = 503


class HealthCheckError(RuntimeError):
    """Raised when runtime metrics cannot produce a usable health reading."""


class RuntimeMetricsPort(Protocol):
    """Port definition for host-provided runtime metrics."""

    def runtime_uptime_ms(self) -> int:
        """Return process uptime in milliseconds.

        Returns:
            int: Non-negative elapsed milliseconds since process start.

        Raises:
            RuntimeError: Raised when the metric cannot be read.
        """


@dataclass(frozen=True)
class HealthReport:
    """Health snapshot returned by the health endpoint.

    Attributes:
        status: `UP` when metrics were collected, `DOWN` otherwise.
        message: Human-readable check outcome.
        timestamp: UTC instant of the check.
        details: Free-form diagnostic details.
        uptime: Process uptime in milliseconds, absent when the check failed.
        version: Application version string.
    """

    status: str
    message: str
    timestamp: datetime
    version: str
    details: dict[str, Any] = field(default_factory=dict)
    uptime: int | None = None


def health_collect_report(
    metrics: RuntimeMetricsPort,
    version: str,
    application_name: str | None = None,
) -> Envelope[HealthReport]:
    """Collect runtime metrics and wrap the resulting report in an envelope.

    Metric collection failures never propagate: they produce a `503`
    envelope whose report is `DOWN` with the failure under `details.error`.

    Args:
        metrics: Runtime metrics source.
        version: Application version reported as-is.
        application_name: Optional application name added to success details.

    Returns:
        Envelope[HealthReport]: `200`/`UP` or `503`/`DOWN` envelope.
    """

    try:
        uptime_ms = _health_read_uptime(metrics)
        details: dict[str, Any] = {
            "diskSpace": "available",
            "memory": "available",
            "uptime": uptime_ms,
        }
        if application_name:
            details["application"] = application_name
        report = HealthReport(
            status=HEALTH_STATUS_UP,
            message="Application health check completed successfully",
            timestamp=datetime.now(timezone.utc),
            version=version,
            details=details,
            uptime=uptime_ms,
        )
        return envelope_build(
            message="Health check successful",
            status=HEALTH_HTTP_STATUS_UP,
            success=True,
            data=report,
        )
    except Exception as error:
        logger.warning("Health check failed: %s", error)
        report = HealthReport(
            status=HEALTH_STATUS_DOWN,
            message="Health check failed",
            timestamp=datetime.now(timezone.utc),
            version=version,
            details={"error": str(error) or type(error).__name__},
        )
        return envelope_build(
            message="Health check failed",
            status=HEALTH_HTTP_STATUS_DOWN,
            success=False,
            data=report,
        )


def _health_read_uptime(metrics: RuntimeMetricsPort) -> int:
    uptime_ms = metrics.runtime_uptime_ms()
    if isinstance(uptime_ms, bool) or not isinstance(uptime_ms, int):
        raise HealthCheckError(f"uptime metric must be an integer, got {type(uptime_ms).__name__}")
    if uptime_ms < 0:
        raise HealthCheckError(f"uptime metric must not be negative, got {uptime_ms}")
    return uptime_ms

"""Domain models used across application layer boundaries."""

from .envelope import Envelope, envelope_build, envelope_error, envelope_success
from .health import (
    HealthCheckError,
    HealthReport,
    RuntimeMetricsPort,
    health_collect_report,
)

__all__ = [
    "Envelope",
    "HealthCheckError",
    "HealthReport",
    "RuntimeMetricsPort",
    "envelope_build",
    "envelope_error",
    "envelope_success",
    "health_collect_report",
]

"""Tests for health report collection and failure containment."""

from __future__ import annotations

from demo_api.domain import HealthReport, health_collect_report


class _FixedRuntimeMetrics:
    """Metrics double returning a fixed uptime value."""

    def __init__(self, uptime_ms: object):
        self._uptime_ms = uptime_ms

    def runtime_uptime_ms(self) -> object:
        return self._uptime_ms


class _RaisingRuntimeMetrics:
    """Metrics double raising the configured error on every read."""

    def __init__(self, error: Exception):
        self._error = error

    def runtime_uptime_ms(self) -> int:
        raise self._error


def test_domain_health_reports_up_with_uptime_and_version() -> None:
    """Produce a `200` envelope with an `UP` report for readable metrics.

    Returns:
        None: Assertions validate report contents.

    Raises:
        AssertionError: Raised when report contents are incorrect.
    """

    envelope = health_collect_report(_FixedRuntimeMetrics(42), version="1.0.0")

    assert envelope.status == 200
    assert envelope.success is True
    assert isinstance(envelope.data, HealthReport)
    assert envelope.data.status == "UP"
    assert envelope.data.uptime == 42
    assert envelope.data.version == "1.0.0"
    assert envelope.data.details == {"diskSpace": "available", "memory": "available", "uptime": 42}


def test_domain_health_never_raises_when_metrics_source_fails() -> None:
    """Contain metrics failures in a `503` envelope with the error detail.

    Returns:
        None: Assertions validate degraded report contents.

    Raises:
        AssertionError: Raised when failure containment is incorrect.
    """

    envelope = health_collect_report(_RaisingRuntimeMetrics(RuntimeError("clock unavailable")), version="1.0.0")

    assert envelope.status == 503
    assert envelope.success is False
    assert envelope.message == "Health check failed"
    assert envelope.data.status == "DOWN"
    assert envelope.data.details == {"error": "clock unavailable"}
    assert envelope.data.uptime is None


def test_domain_health_uses_error_kind_when_message_is_empty() -> None:
    envelope = health_collect_report(_RaisingRuntimeMetrics(KeyError()), version="1.0.0")

    assert envelope.data.details["error"]


def test_domain_health_rejects_negative_uptime_reading() -> None:
    envelope = health_collect_report(_FixedRuntimeMetrics(-5), version="1.0.0")

    assert envelope.status == 503
    assert "must not be negative" in envelope.data.details["error"]


def test_domain_health_rejects_non_integer_uptime_reading() -> None:
    envelope = health_collect_report(_FixedRuntimeMetrics("soon"), version="1.0.0")

    assert envelope.status == 503
    assert envelope.data.status == "DOWN"

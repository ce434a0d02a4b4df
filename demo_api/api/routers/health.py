"""Health endpoint router composition for runtime liveness checks."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from demo_api.config import AppSettings
from demo_api.domain import RuntimeMetricsPort, health_collect_report

from ..responses import api_envelope_response


def api_create_health_router(settings: AppSettings, runtime_metrics: RuntimeMetricsPort) -> APIRouter:
    """Create health-check router reporting uptime and version.

    Args:
        settings: Runtime settings providing application name and version.
        runtime_metrics: Runtime metrics source read on every check.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if runtime_metrics is None:
        raise ValueError("runtime_metrics must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return the health envelope.

        Returns:
            JSONResponse: `200` with an `UP` report, or `503` with a `DOWN` report.
        """

        envelope = health_collect_report(
            metrics=runtime_metrics,
            version=settings.application_version,
            application_name=settings.application_name,
        )
        return api_envelope_response(envelope)

    return router

"""FastAPI application factory for the envelope service."""

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from demo_api.config import AppSettings
from demo_api.domain import RuntimeMetricsPort, envelope_success

from .error_handlers import api_register_error_handlers
from .responses import api_envelope_response
from .routers import api_create_error_router, api_create_health_router


def create_api_application(settings: AppSettings, runtime_metrics: RuntimeMetricsPort) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.
        runtime_metrics: Runtime metrics source used by the health endpoint.

    Returns:
        FastAPI: Application with health, error and foundation routes and
            envelope-producing exception handlers.

    Raises:
        ValueError: Raised when router dependencies are invalid.
    """

    application = FastAPI(title=settings.application_name, version=settings.application_version)

    @application.get("/", tags=["foundation"])
    def foundation_index() -> JSONResponse:
        """Return a minimal foundation envelope for bootstrap verification.

        Returns:
            JSONResponse: Success envelope naming the service and environment.
        """

        envelope = envelope_success(
            message="Service is running",
            data={
                "service": settings.application_name,
                "environment": settings.environment_name,
            },
        )
        return api_envelope_response(envelope)

    application.include_router(api_create_health_router(settings=settings, runtime_metrics=runtime_metrics))
    application.include_router(api_create_error_router())
    api_register_error_handlers(application)

    return application

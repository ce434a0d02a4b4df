"""Application bootstrap wiring for startup validation and dependency assembly."""

import logging

from fastapi import FastAPI

from demo_api.api import create_api_application
from demo_api.config import AppSettings, config_configure_logging, config_load_settings
from demo_api.runtime import ProcessRuntimeMetrics

logger = logging.getLogger(__name__)


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-validated settings; loaded from the environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings if settings is not None else config_load_settings()
    config_configure_logging(resolved_settings.log_level)
    runtime_metrics = ProcessRuntimeMetrics()
    application = create_api_application(settings=resolved_settings, runtime_metrics=runtime_metrics)
    logger.info(
        "Application %s %s initialized for environment %s",
        resolved_settings.application_name,
        resolved_settings.application_version,
        resolved_settings.environment_name,
    )
    return application

"""API router package for endpoint composition."""

from .error import api_create_error_router
from .health import api_create_health_router

__all__ = ["api_create_error_router", "api_create_health_router"]

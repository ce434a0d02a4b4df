"""Framework exception adaptation onto the error translator.

Starlette and FastAPI raise their own exception types for routing and
request validation failures. These are converted into the typed failure
categories before translation so the classification table stays
framework independent.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Any, Iterator, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.routing import Match

from demo_api.domain import Envelope
from demo_api.errors import (
    DemoApiError,
    FieldValidationError,
    MethodNotSupportedError,
    MissingParameterError,
    RouteNotFoundError,
    errors_translate_dispatch_failure,
    errors_translate_exception,
)

from .responses import api_envelope_response

UNKNOWN_PARAMETER_TYPE = "Unknown"
_PARAMETER_LOCATIONS = frozenset({"query", "path", "header", "cookie"})
_FIELD_LOCATION_PREFIXES = _PARAMETER_LOCATIONS | {"body"}


def api_register_error_handlers(application: FastAPI) -> None:
    """Register envelope-producing exception handlers on the application.

    Args:
        application: FastAPI application to configure.

    Returns:
        None: Handlers are registered as a side effect.
    """

    @application.exception_handler(StarletteHTTPException)
    async def api_handle_http_exception(request: Request, error: StarletteHTTPException) -> JSONResponse:
        """Translate routing and explicit HTTP failures."""

        envelope = api_translate_http_exception(request, error)
        headers = dict(error.headers or {})
        if error.status_code == HTTPStatus.METHOD_NOT_ALLOWED and isinstance(envelope.data, dict):
            headers["Allow"] = ", ".join(envelope.data.get("supportedMethods", ()))
        return api_envelope_response(envelope, headers=headers)

    @application.exception_handler(RequestValidationError)
    async def api_handle_validation_error(request: Request, error: RequestValidationError) -> JSONResponse:
        """Translate request parameter and body validation failures."""

        categorized_error = api_convert_validation_error(request, error)
        return api_envelope_response(errors_translate_exception(categorized_error))

    @application.exception_handler(Exception)
    async def api_handle_unexpected_error(request: Request, error: Exception) -> JSONResponse:
        """Translate any failure not handled by a more specific handler."""

        return api_envelope_response(errors_translate_exception(error))


def api_translate_http_exception(request: Request, error: StarletteHTTPException) -> Envelope[Any]:
    """Map a Starlette HTTP exception to an error envelope.

    Unmatched routes and rejected methods go through the classification
    table. Any other HTTP status was already decided by the host, so it is
    mapped through the status phrase table.

    Args:
        request: Request being handled.
        error: HTTP exception raised by routing or a route handler.

    Returns:
        Envelope[Any]: Error envelope for the failure.
    """

    if error.status_code == HTTPStatus.NOT_FOUND and request.scope.get("route") is None:
        return errors_translate_exception(RouteNotFoundError(path=request.url.path))

    if error.status_code == HTTPStatus.METHOD_NOT_ALLOWED:
        allow_header = (error.headers or {}).get("Allow", "")
        return errors_translate_exception(
            MethodNotSupportedError(
                method=request.method,
                supported_methods=api_collect_supported_methods(request, allow_header),
            )
        )

    detail = error.detail if isinstance(error.detail, str) else None
    return errors_translate_dispatch_failure(
        status=error.status_code,
        message=detail,
        error=_api_status_reason(error.status_code),
    )


def api_parse_allow_header(allow_header: str) -> list[str]:
    """Split an `Allow` header into a sorted, de-duplicated method list.

    Args:
        allow_header: Raw `Allow` header value.

    Returns:
        list[str]: Upper-case method names in alphabetical order.
    """

    return sorted({method.strip().upper() for method in allow_header.split(",") if method.strip()})


def api_collect_supported_methods(request: Request, allow_header: str = "") -> list[str]:
    """Collect the methods accepted by every route matching the request path.

    Starlette stops at the first partially matching route, so its `Allow`
    header misses methods served by separate handlers on the same path.

    Args:
        request: Request rejected with `405`.
        allow_header: `Allow` header attached by the router, merged into the result.

    Returns:
        list[str]: Upper-case method names in alphabetical order.
    """

    supported_methods = set(api_parse_allow_header(allow_header))
    scope = dict(request.scope)
    for route in getattr(request.app.router, "routes", ()):
        route_methods = getattr(route, "methods", None)
        if not route_methods:
            continue
        match, _ = route.matches(scope)
        if match is not Match.NONE:
            supported_methods.update(method.upper() for method in route_methods)
    return sorted(supported_methods)


def api_convert_validation_error(request: Request, error: RequestValidationError) -> DemoApiError:
    """Convert a FastAPI validation error into a typed failure category.

    A missing query, path, header, or cookie parameter becomes
    `MissingParameterError`; every other validation issue is collected
    into one `FieldValidationError`.

    Args:
        request: Request being handled.
        error: Validation error raised by FastAPI.

    Returns:
        DemoApiError: Missing-parameter or field-validation failure.
    """

    issues = error.errors()
    for issue in issues:
        location = tuple(issue.get("loc", ()))
        if issue.get("type") == "missing" and len(location) >= 2 and location[0] in _PARAMETER_LOCATIONS:
            parameter_name = str(location[-1])
            return MissingParameterError(
                parameter_name=parameter_name,
                parameter_type=api_resolve_parameter_type(request, location[0], parameter_name),
            )

    field_errors: dict[str, str] = {}
    for issue in issues:
        field_name = _api_field_name(issue.get("loc", ()))
        field_errors.setdefault(field_name, str(issue.get("msg", "invalid value")))
    return FieldValidationError(field_errors=field_errors)


def api_resolve_parameter_type(request: Request, location: str, parameter_name: str) -> str:
    """Resolve the declared type name of a route parameter.

    Args:
        request: Request whose matched route declares the parameter.
        location: Parameter location (`query`, `path`, `header`, `cookie`).
        parameter_name: Parameter name or alias as reported by validation.

    Returns:
        str: Annotation type name, or `Unknown` when it cannot be resolved.
    """

    dependant = getattr(request.scope.get("route"), "dependant", None)
    if dependant is None:
        return UNKNOWN_PARAMETER_TYPE

    for parameter in _api_iter_parameters(dependant, location):
        if parameter_name in (parameter.alias, parameter.name):
            annotation = getattr(parameter.field_info, "annotation", None) or getattr(parameter, "type_", None)
            if annotation is None:
                return UNKNOWN_PARAMETER_TYPE
            return getattr(annotation, "__name__", None) or str(annotation)
    return UNKNOWN_PARAMETER_TYPE


def _api_iter_parameters(dependant: Any, location: str) -> Iterator[Any]:
    yield from getattr(dependant, f"{location}_params", ())
    for sub_dependant in getattr(dependant, "dependencies", ()):
        yield from _api_iter_parameters(sub_dependant, location)


def _api_field_name(location: Sequence[Any]) -> str:
    parts = [str(part) for part in location]
    if len(parts) > 1 and parts[0] in _FIELD_LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(parts) or "request"


def _api_status_reason(status_code: int) -> str | None:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return None

"""Typed failure categories recognized by the error translator."""

from __future__ import annotations

from typing import Sequence


class DemoApiError(Exception):
    """Base exception for categorized request-handling failures."""


class RouteNotFoundError(DemoApiError):
    """No route matched the requested path.

    Attributes:
        path: Requested path.
    """

    def __init__(self, path: str):
        super().__init__(f"no route for {path}")
        self.path = path


class MethodNotSupportedError(DemoApiError):
    """The route exists but does not accept the request method.

    Attributes:
        method: Rejected HTTP method.
        supported_methods: Methods the route accepts.
    """

    def __init__(self, method: str, supported_methods: Sequence[str]):
        super().__init__(f"method {method} not supported")
        self.method = method
        self.supported_methods = list(supported_methods)


class MissingParameterError(DemoApiError):
    """A required request parameter was not supplied.

    Attributes:
        parameter_name: Name of the missing parameter.
        parameter_type: Declared type name of the missing parameter.
    """

    def __init__(self, parameter_name: str, parameter_type: str):
        super().__init__(f"missing parameter {parameter_name}")
        self.parameter_name = parameter_name
        self.parameter_type = parameter_type


class FieldValidationError(DemoApiError):
    """One or more request fields failed validation.

    Attributes:
        field_errors: Mapping of field name to violation message.
    """

    def __init__(self, field_errors: dict[str, str]):
        super().__init__("validation failed for " + ", ".join(field_errors))
        self.field_errors = dict(field_errors)

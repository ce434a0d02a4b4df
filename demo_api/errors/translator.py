"""Classification of request-handling failures into error envelopes.

Rules are evaluated in order and the first matching rule builds the
envelope. Typed categories come before the builtin `ValueError` and
`RuntimeError` rows, and the unclassified row is always last.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from http import HTTPStatus
from typing import Any, Callable, Final

from demo_api.domain import Envelope, envelope_error

from .exceptions import (
    FieldValidationError,
    MethodNotSupportedError,
    MissingParameterError,
    RouteNotFoundError,
)

logger = logging.getLogger(__name__)

ERROR_UNKNOWN_CAUSE: Final[str] = "Unknown"


class ErrorCategory(str, Enum):
    """Closed set of failure categories handled at the API boundary."""

    ROUTE_NOT_FOUND = "route_not_found"
    MISSING_PARAMETER = "missing_parameter"
    VALIDATION_FAILURE = "validation_failure"
    METHOD_NOT_SUPPORTED = "method_not_supported"
    INVALID_ARGUMENT = "invalid_argument"
    RUNTIME_FAILURE = "runtime_failure"
    UNCLASSIFIED_FAILURE = "unclassified_failure"


@dataclass(frozen=True)
class ErrorTranslationRule:
    """One row of the classification table.

    Attributes:
        category: Category the rule classifies into.
        matches: Predicate selecting the failures this rule handles.
        build: Envelope builder for matched failures.
    """

    category: ErrorCategory
    matches: Callable[[BaseException], bool]
    build: Callable[[Any], Envelope[Any]]


def _errors_build_route_not_found(error: RouteNotFoundError) -> Envelope[Any]:
    return envelope_error(
        message=f"Endpoint not found: {error.path}",
        status=HTTPStatus.NOT_FOUND.value,
    )


def _errors_build_missing_parameter(error: MissingParameterError) -> Envelope[Any]:
    return envelope_error(
        message=f"Missing required parameter: {error.parameter_name}",
        status=HTTPStatus.BAD_REQUEST.value,
        data={
            "parameterName": error.parameter_name,
            "parameterType": error.parameter_type,
        },
    )


def _errors_build_validation_failure(error: FieldValidationError) -> Envelope[Any]:
    return envelope_error(
        message="Validation failed",
        status=HTTPStatus.BAD_REQUEST.value,
        data=dict(error.field_errors),
    )


def _errors_build_method_not_supported(error: MethodNotSupportedError) -> Envelope[Any]:
    return envelope_error(
        message=f"HTTP method not supported: {error.method}",
        status=HTTPStatus.METHOD_NOT_ALLOWED.value,
        data={
            "method": error.method,
            "supportedMethods": list(error.supported_methods),
        },
    )


def _errors_build_invalid_argument(error: ValueError) -> Envelope[Any]:
    return envelope_error(
        message=f"Invalid request: {error}",
        status=HTTPStatus.BAD_REQUEST.value,
    )


def _errors_build_runtime_failure(error: RuntimeError) -> Envelope[Any]:
    return envelope_error(
        message=f"Internal server error: {error}",
        status=HTTPStatus.INTERNAL_SERVER_ERROR.value,
    )


def _errors_build_unclassified_failure(error: BaseException) -> Envelope[Any]:
    cause = error.__cause__
    return envelope_error(
        message=f"An unexpected error occurred: {error}",
        status=HTTPStatus.INTERNAL_SERVER_ERROR.value,
        data={
            "exceptionKind": type(error).__name__,
            "cause": str(cause) if cause is not None else ERROR_UNKNOWN_CAUSE,
        },
    )


ERROR_TRANSLATION_RULES: Final[tuple[ErrorTranslationRule, ...]] = (
    ErrorTranslationRule(
        category=ErrorCategory.ROUTE_NOT_FOUND,
        matches=lambda error: isinstance(error, RouteNotFoundError),
        build=_errors_build_route_not_found,
    ),
    ErrorTranslationRule(
        category=ErrorCategory.MISSING_PARAMETER,
        matches=lambda error: isinstance(error, MissingParameterError),
        build=_errors_build_missing_parameter,
    ),
    ErrorTranslationRule(
        category=ErrorCategory.VALIDATION_FAILURE,
        matches=lambda error: isinstance(error, FieldValidationError),
        build=_errors_build_validation_failure,
    ),
    ErrorTranslationRule(
        category=ErrorCategory.METHOD_NOT_SUPPORTED,
        matches=lambda error: isinstance(error, MethodNotSupportedError),
        build=_errors_build_method_not_supported,
    ),
    ErrorTranslationRule(
        category=ErrorCategory.INVALID_ARGUMENT,
        matches=lambda error: isinstance(error, ValueError),
        build=_errors_build_invalid_argument,
    ),
    ErrorTranslationRule(
        category=ErrorCategory.RUNTIME_FAILURE,
        matches=lambda error: isinstance(error, RuntimeError),
        build=_errors_build_runtime_failure,
    ),
)

ERROR_DEFAULT_RULE: Final[ErrorTranslationRule] = ErrorTranslationRule(
    category=ErrorCategory.UNCLASSIFIED_FAILURE,
    matches=lambda error: True,
    build=_errors_build_unclassified_failure,
)


def errors_select_rule(error: BaseException) -> ErrorTranslationRule:
    """Return the first classification rule matching a failure.

    Args:
        error: Failure raised during request handling.

    Returns:
        ErrorTranslationRule: Matching rule, or the unclassified default rule.
    """

    for rule in ERROR_TRANSLATION_RULES:
        if rule.matches(error):
            return rule
    return ERROR_DEFAULT_RULE


def errors_translate_exception(error: BaseException) -> Envelope[Any]:
    """Translate a request-handling failure into an error envelope.

    Args:
        error: Failure raised during request handling.

    Returns:
        Envelope[Any]: Error envelope whose status matches the classification table.
    """

    rule = errors_select_rule(error)
    try:
        envelope = rule.build(error)
    except Exception:
        logger.exception("Error translation failed for %s", type(error).__name__)
        return envelope_error(
            message="An unexpected error occurred",
            status=HTTPStatus.INTERNAL_SERVER_ERROR.value,
        )

    if envelope.status >= HTTPStatus.INTERNAL_SERVER_ERROR.value:
        logger.error(
            "Request failed [%s]: %s",
            rule.category.value,
            envelope.message,
            exc_info=error if rule.category is ErrorCategory.UNCLASSIFIED_FAILURE else None,
        )
    else:
        logger.warning("Request rejected [%s]: %s", rule.category.value, envelope.message)
    return envelope

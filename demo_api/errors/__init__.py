"""Error classification and envelope translation for the API boundary."""

from .exceptions import (
    DemoApiError,
    FieldValidationError,
    MethodNotSupportedError,
    MissingParameterError,
    RouteNotFoundError,
)
from .phrases import (
    ERROR_STATUS_PHRASES,
    errors_coerce_status,
    errors_status_phrase,
    errors_translate_dispatch_failure,
)
from .translator import (
    ERROR_DEFAULT_RULE,
    ERROR_TRANSLATION_RULES,
    ErrorCategory,
    ErrorTranslationRule,
    errors_select_rule,
    errors_translate_exception,
)

__all__ = [
    "DemoApiError",
    "ERROR_DEFAULT_RULE",
    "ERROR_STATUS_PHRASES",
    "ERROR_TRANSLATION_RULES",
    "ErrorCategory",
    "ErrorTranslationRule",
    "FieldValidationError",
    "MethodNotSupportedError",
    "MissingParameterError",
    "RouteNotFoundError",
    "errors_coerce_status",
    "errors_select_rule",
    "errors_status_phrase",
    "errors_translate_dispatch_failure",
    "errors_translate_exception",
]

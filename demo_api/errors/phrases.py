"""User-facing status phrases for the terminal `/error` path.

This path only sees the status/message/error triple the host already
computed, so the phrase is chosen by status code alone. Phrases use the full
wording ("Not Found: the requested resource could not be found"), not an
abbreviated form.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any, Final

from demo_api.domain import Envelope, envelope_error

logger = logging.getLogger(__name__)

ERROR_UNKNOWN_STATUS_MESSAGE: Final[str] = "An unknown error occurred"
ERROR_GENERIC_FALLBACK_MESSAGE: Final[str] = "An error occurred while processing your request"
ERROR_DEFAULT_STATUS: Final[int] = HTTPStatus.INTERNAL_SERVER_ERROR.value

ERROR_STATUS_PHRASES: Final[dict[int, str]] = {
    400: "Bad Request: the request was invalid or malformed",
    401: "Unauthorized: authentication is required to access this resource",
    403: "Forbidden: you don't have permission to access this resource",
    404: "Not Found: the requested resource could not be found",
    405: "Method Not Allowed: the HTTP method is not supported for this endpoint",
    408: "Request Timeout: the request took too long to process",
    409: "Conflict: the request conflicts with the current state of the resource",
    429: "Too Many Requests: rate limit exceeded, please try again later",
    500: "Internal Server Error: something went wrong on our end",
    502: "Bad Gateway: invalid response from upstream server",
    503: "Service Unavailable: the service is temporarily unavailable",
    504: "Gateway Timeout: the upstream server took too long to respond",
}


def errors_coerce_status(value: Any) -> int | None:
    """Parse a host-provided status attribute.

    Args:
        value: Raw status value (int, numeric string, or None).

    Returns:
        int | None: Parsed status, or None when absent or not an integer.
    """

    if value is None or isinstance(value, bool):
        return None
    try:
        status = int(str(value).strip())
    except ValueError:
        return None
    return status


def errors_status_phrase(status: int | None, error: str | None = None) -> str:
    """Resolve the user-facing phrase for a status code.

    Args:
        status: HTTP status code, or None when the host did not provide one.
        error: Upstream error string used when status has no phrase.

    Returns:
        str: Phrase-table entry, upstream error, or generic fallback.
    """

    if status is None:
        return ERROR_UNKNOWN_STATUS_MESSAGE
    phrase = ERROR_STATUS_PHRASES.get(status)
    if phrase is not None:
        return phrase
    if error:
        return error
    return ERROR_GENERIC_FALLBACK_MESSAGE


def errors_translate_dispatch_failure(
    status: Any = None,
    message: str | None = None,
    error: str | None = None,
) -> Envelope[Any]:
    """Map a host-computed failure triple to a data-less error envelope.

    Args:
        status: Host-computed status; values outside `400..599` keep their phrase
            lookup but the envelope carries `500`.
        message: Host-computed detail message, logged only.
        error: Host-computed error reason.

    Returns:
        Envelope[Any]: Error envelope without `data`.
    """

    resolved_status = errors_coerce_status(status)
    phrase = errors_status_phrase(resolved_status, error)
    logger.info(
        "Dispatch failure mapped: status=%s error=%s message=%s",
        resolved_status,
        error,
        message,
    )
    envelope_status = ERROR_DEFAULT_STATUS
    if resolved_status is not None and 400 <= resolved_status <= 599:
        envelope_status = resolved_status
    return envelope_error(message=phrase, status=envelope_status)

"""Uniform response envelope shared by every API surface.

Every response body, success or failure, is an `Envelope` so callers can
read `success` and `status` without branching on payload shape.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Generic, TypeVar

T = TypeVar("T")

ENVELOPE_SUCCESS_STATUS = 200
ENVELOPE_ERROR_STATUS_FLOOR = 400


@dataclass(frozen=True)
class Envelope(Generic[T]):
    """Response wrapper around a result or an error.

    Attributes:
        message: Human-readable outcome message.
        timestamp: UTC instant captured when the envelope was built.
        status: HTTP status code carried by the response.
        success: Explicit success flag; helpers keep it equal to `status < 400`.
        data: Optional payload, omitted from serialized output when absent.
    """

    message: str
    timestamp: datetime
    status: int
    success: bool
    data: T | None = None


def envelope_build(message: str, status: int, success: bool, data: T | None = None) -> Envelope[T]:
    """Build an envelope with an explicit success flag.

    Args:
        message: Outcome message.
        status: HTTP status code.
        success: Success flag stored as given.
        data: Optional payload.

    Returns:
        Envelope[T]: Envelope stamped with the current UTC time.
    """

    return Envelope(
        message=message,
        timestamp=datetime.now(timezone.utc),
        status=status,
        success=success,
        data=data,
    )


def envelope_success(message: str, data: T | None = None) -> Envelope[T]:
    """Build a `200` success envelope.

    Args:
        message: Outcome message.
        data: Optional payload.

    Returns:
        Envelope[T]: Envelope with `status=200` and `success=True`.
    """

    return envelope_build(message=message, status=ENVELOPE_SUCCESS_STATUS, success=True, data=data)


def envelope_error(message: str, status: int, data: T | None = None) -> Envelope[T]:
    """Build a failure envelope.

    Args:
        message: Failure message.
        status: HTTP error status code (`>= 400`).
        data: Optional structured failure detail.

    Returns:
        Envelope[T]: Envelope with `success=False`.

    Raises:
        ValueError: Raised when status is not an error status.
    """

    if status < ENVELOPE_ERROR_STATUS_FLOOR:
        raise ValueError(f"error envelope status must be >= {ENVELOPE_ERROR_STATUS_FLOOR}, got {status}")
    return envelope_build(message=message, status=status, success=False, data=data)

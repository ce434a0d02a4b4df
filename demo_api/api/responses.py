"""Envelope serialization for FastAPI responses."""

from __future__ import annotations

from typing import Any, Mapping

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from demo_api.domain import Envelope


def api_envelope_payload(envelope: Envelope[Any]) -> dict[str, Any]:
    """Convert an envelope to a JSON-compatible mapping.

    Fields holding `None` are dropped rather than serialized as `null`, so an
    envelope without payload has no `data` key at all.

    Args:
        envelope: Envelope to serialize.

    Returns:
        dict[str, Any]: JSON-compatible payload.
    """

    return jsonable_encoder(envelope, exclude_none=True)


def api_envelope_response(
    envelope: Envelope[Any],
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    """Render an envelope as a JSON response with a matching HTTP status.

    Args:
        envelope: Envelope to render.
        headers: Optional response headers.

    Returns:
        JSONResponse: Response whose status code equals `envelope.status`.
    """

    return JSONResponse(
        content=api_envelope_payload(envelope),
        status_code=envelope.status,
        headers=dict(headers) if headers else None,
    )

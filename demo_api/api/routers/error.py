"""Terminal `/error` route for failures the host already reduced to a status."""

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from demo_api.errors import errors_translate_dispatch_failure

from ..responses import api_envelope_response

ERROR_ROUTE_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def api_create_error_router() -> APIRouter:
    """Create the catch-all error router.

    Returns:
        APIRouter: Router exposing `/error` for every common method.
    """

    router = APIRouter(tags=["errors"])

    @router.api_route("/error", methods=ERROR_ROUTE_METHODS)
    def api_error_dispatch(
        status_code: str | None = Query(default=None, alias="status"),
        message: str | None = Query(default=None),
        error: str | None = Query(default=None),
    ) -> JSONResponse:
        """Map host-computed `status`, `message` and `error` attributes to an envelope.

        Returns:
            JSONResponse: Data-less error envelope with the phrase-table message.
        """

        envelope = errors_translate_dispatch_failure(status=status_code, message=message, error=error)
        return api_envelope_response(envelope)

    return router

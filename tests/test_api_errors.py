"""Tests for envelope translation of request-handling failures over HTTP."""

from __future__ import annotations

import pytest
from fastapi import FastAPI, HTTPException, Query
from fastapi.testclient import TestClient
from pydantic import BaseModel, Field

from demo_api.api.application import create_api_application
from demo_api.config import AppSettings


class _RuntimeMetricsStub:
    """Runtime metrics stub for API factory dependency injection."""

    def runtime_uptime_ms(self) -> int:
        return 0


class _PersonPayload(BaseModel):
    """Body model with two independently validated fields."""

    name: str
    age: int = Field(gt=0)


def _build_application() -> FastAPI:
    """Create the service application with extra failure-raising routes.

    Returns:
        FastAPI: Application under test.
    """

    application = create_api_application(
        AppSettings(environment_name="test"),
        _RuntimeMetricsStub(),
    )

    @application.post("/people")
    def create_person(payload: _PersonPayload) -> dict[str, str]:
        return {"name": payload.name}

    @application.get("/lookup")
    def lookup(id: int = Query()) -> dict[str, int]:
        return {"id": id}

    @application.api_route("/items", methods=["GET", "POST"])
    def items() -> dict[str, str]:
        return {"status": "ok"}

    @application.get("/orders")
    def list_orders() -> list[str]:
        return []

    @application.post("/orders")
    def create_order() -> dict[str, str]:
        return {"status": "created"}

    @application.get("/invalid")
    def invalid() -> None:
        raise ValueError("quantity must be positive")

    @application.get("/runtime")
    def runtime() -> None:
        raise RuntimeError("worker crashed")

    @application.get("/unexpected")
    def unexpected() -> None:
        raise LookupError("lookup failed") from ConnectionError("upstream reset")

    @application.get("/forbidden")
    def forbidden() -> None:
        raise HTTPException(status_code=403, detail="no access")

    return application


@pytest.fixture()
def client() -> TestClient:
    """Provide a client that renders server errors as responses."""

    return TestClient(_build_application(), raise_server_exceptions=False)


def test_api_errors_unknown_route_returns_not_found_envelope(client: TestClient) -> None:
    """Translate unmatched paths to a data-less `404` envelope."""

    response = client.get("/does-not-exist")

    body = response.json()
    assert response.status_code == 404
    assert body["message"] == "Endpoint not found: /does-not-exist"
    assert body["success"] is False
    assert body["status"] == 404
    assert "data" not in body


def test_api_errors_validation_failure_lists_each_field(client: TestClient) -> None:
    """Collect one message per failed body field."""

    response = client.post("/people", json={"age": -3})

    body = response.json()
    assert response.status_code == 400
    assert body["message"] == "Validation failed"
    assert set(body["data"]) == {"name", "age"}
    assert all(isinstance(message, str) and message for message in body["data"].values())


def test_api_errors_missing_query_parameter_reports_name_and_type(client: TestClient) -> None:
    """Report missing parameter name with its declared type."""

    response = client.get("/lookup")

    body = response.json()
    assert response.status_code == 400
    assert body["message"] == "Missing required parameter: id"
    assert body["data"] == {"parameterName": "id", "parameterType": "int"}


def test_api_errors_unsupported_method_lists_supported_methods(client: TestClient) -> None:
    """Reject unsupported methods with the route's allowed methods."""

    response = client.delete("/items")

    body = response.json()
    assert response.status_code == 405
    assert body["message"] == "HTTP method not supported: DELETE"
    assert body["data"] == {"method": "DELETE", "supportedMethods": ["GET", "POST"]}


def test_api_errors_unsupported_method_merges_separate_route_handlers(client: TestClient) -> None:
    """List methods from every handler registered on the rejected path."""

    response = client.delete("/orders")

    body = response.json()
    assert response.status_code == 405
    assert body["data"] == {"method": "DELETE", "supportedMethods": ["GET", "POST"]}
    assert response.headers["Allow"] == "GET, POST"


def test_api_errors_value_error_maps_to_bad_request(client: TestClient) -> None:
    response = client.get("/invalid")

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request: quantity must be positive"
    assert "data" not in response.json()


def test_api_errors_runtime_error_maps_to_internal_server_error(client: TestClient) -> None:
    response = client.get("/runtime")

    assert response.status_code == 500
    assert response.json()["message"] == "Internal server error: worker crashed"
    assert "data" not in response.json()


def test_api_errors_unclassified_failure_captures_kind_and_cause(client: TestClient) -> None:
    """Fall through to the default row with exception kind and cause."""

    response = client.get("/unexpected")

    body = response.json()
    assert response.status_code == 500
    assert body["message"] == "An unexpected error occurred: lookup failed"
    assert body["data"] == {"exceptionKind": "LookupError", "cause": "upstream reset"}


def test_api_errors_explicit_http_exception_uses_phrase_table(client: TestClient) -> None:
    """Map host-decided statuses through the user-facing phrase table."""

    response = client.get("/forbidden")

    body = response.json()
    assert response.status_code == 403
    assert body["message"] == "Forbidden: you don't have permission to access this resource"
    assert body["success"] is False
    assert "data" not in body


def test_api_errors_error_route_maps_upstream_not_found(client: TestClient) -> None:
    """Map an upstream `404` without message to the not-found phrase."""

    response = client.get("/error", params={"status": "404"})

    body = response.json()
    assert response.status_code == 404
    assert body["message"] == "Not Found: the requested resource could not be found"
    assert body["status"] == 404
    assert "data" not in body


def test_api_errors_error_route_without_status_defaults_to_internal_error(client: TestClient) -> None:
    response = client.post("/error")

    assert response.status_code == 500
    assert response.json()["message"] == "An unknown error occurred"


def test_api_errors_error_route_unlisted_status_prefers_upstream_error(client: TestClient) -> None:
    response = client.get("/error", params={"status": "418", "error": "I'm a teapot"})

    assert response.status_code == 418
    assert response.json()["message"] == "I'm a teapot"


def test_api_errors_error_route_non_error_status_keeps_upstream_error(client: TestClient) -> None:
    """Keep the upstream error text for statuses outside the error range."""

    response = client.get("/error", params={"status": "302", "error": "Found"})

    body = response.json()
    assert response.status_code == 500
    assert body["message"] == "Found"
    assert body["success"] is False

"""Tests for request_id in error responses."""

import pytest
from fastapi.testclient import TestClient

from src.louvores.main import create_app


@pytest.fixture
def client() -> TestClient:
    """Test client fixture."""
    app = create_app()
    return TestClient(app)


def test_http_exception_includes_request_id(client: TestClient) -> None:
    """Test that HTTPException responses include request_id."""
    response = client.get("/api/v1/nonexistent-endpoint")

    assert response.status_code == 404

    data = response.json()
    assert "request_id" in data, "request_id not found in error response"
    assert "detail" in data, "detail not found in error response"
    assert isinstance(data["request_id"], str), "request_id is not a string"


def test_service_error_includes_request_id(client: TestClient) -> None:
    """Domain errors use the {success, error, request_id} envelope."""
    response = client.get("/api/v1/permissoes/me")

    assert response.status_code == 401
    data = response.json()
    assert data["success"] is False
    assert data["error"]
    assert data["request_id"]


def test_request_id_echoed_in_header(client: TestClient) -> None:
    response = client.get("/api/v1/nonexistent-endpoint")

    assert response.headers["X-Request-ID"] == response.json()["request_id"]


def test_incoming_request_id_is_propagated(client: TestClient) -> None:
    request_id = "0b6e3a8c-54b0-4d83-9f3b-6c1a2f5e7d90"
    response = client.get("/api/v1/nonexistent-endpoint", headers={"X-Request-ID": request_id})

    assert response.json()["request_id"] == request_id


def test_different_requests_have_different_ids(client: TestClient) -> None:
    """Test that different requests get different request IDs."""
    data1 = client.get("/api/v1/endpoint1").json()
    data2 = client.get("/api/v1/endpoint2").json()

    assert data1["request_id"] != data2["request_id"], "Different requests have same request_id"

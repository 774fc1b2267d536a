"""Tests for health check endpoints."""

from fastapi.testclient import TestClient

from grocerylist.main import app


def test_health_check() -> None:
    """Test basic health check endpoint."""
    client = TestClient(app)
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "grocerylist-api"}


def test_root_endpoint() -> None:
    """Test root endpoint returns API info."""
    client = TestClient(app)
    response = client.get("/")
    assert response.status_code == 200

    data = response.json()
    assert data["name"] == "Grocerylist API"
    assert "version" in data
    assert data["docs"] == "/docs"


def test_request_id_header() -> None:
    """Test that the request id is echoed back."""
    client = TestClient(app)
    response = client.get("/health", headers={"X-Request-ID": "abc123"})
    assert response.headers["X-Request-ID"] == "abc123"

    generated = client.get("/health").headers["X-Request-ID"]
    assert len(generated) == 32

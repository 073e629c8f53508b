from __future__ import annotations

from fastapi.testclient import TestClient

from content_review_hub.main import app

client = TestClient(app)


def test_health():
    """Test the /health endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_healthz():
    """Test the /healthz endpoint."""
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_version():
    """Test the /version endpoint."""
    response = client.get("/version")
    assert response.status_code == 200
    # The version comes from the installed package metadata
    assert isinstance(response.json()["version"], str)

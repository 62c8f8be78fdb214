"""API tests: health and root endpoints."""
import pytest

from location_store import SCHEMA_VERSION

pytestmark = pytest.mark.api


def test_api_health_returns_200(client):
    """GET /api/health returns 200, schema version and location count."""
    r = client.get("/api/health")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "ok"
    assert data["service"] == "spotfinder"
    assert data["schema_version"] == SCHEMA_VERSION
    assert data["location_count"] == 3


def test_root_returns_info(client):
    """GET / returns service info and docs link."""
    r = client.get("/")
    assert r.status_code == 200
    data = r.json()
    assert data["service"] == "spotfinder"
    assert data["health"] == "/api/health"

"""Tests for status, health and metrics endpoints."""

from fastapi.testclient import TestClient

from css_inline_minifier import __version__
from css_inline_minifier.api.server import create_app
from css_inline_minifier.config import Settings


def make_client():
    """Create a test client."""
    return TestClient(create_app(Settings()))


def test_healthz():
    resp = make_client().get("/healthz")
    assert resp.status_code == 200
    assert resp.json()["ok"] is True


def test_healthz_not_marked_deprecated():
    operation = make_client().get("/openapi.json").json()["paths"]["/healthz"]["get"]
    assert not operation.get("deprecated", False)
    assert "deprecated" not in operation.get("description", "").lower()


def test_health_live():
    resp = make_client().get("/health/live")
    assert resp.status_code == 200
    assert resp.json()["status"] == "alive"


def test_version_endpoint():
    resp = make_client().get("/api/status/version")
    assert resp.status_code == 200
    data = resp.json()
    assert data["version"] == __version__
    assert data["alphabet_size"] == 54


def test_metrics_reports_minified_documents():
    client = make_client()
    client.post("/api/minify", json={"html": "<style>.x{a:b}</style>"})

    resp = client.get("/metrics")

    assert resp.status_code == 200
    assert 'minifier_documents_processed_total{source="api"}' in resp.text

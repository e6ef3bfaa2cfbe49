"""
Tests for the index and health endpoints and the request logging middleware.
"""

from test_fixtures import client


def test_index_lists_endpoints(client):
    r = client.get("/")
    assert r.status_code == 200
    body = r.json()
    assert body["message"].startswith("Welcome")
    assert "GET /api/menu-items" in body["endpoints"]
    assert "GET /api/search" in body["endpoints"]
    assert len(body["endpoints"]) == 6


def test_health_check(client):
    r = client.get("/health-check")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["database"] == "ok"


def test_request_id_headers(client):
    r = client.get("/api/menu-items")
    assert r.headers["X-Request-ID"]
    assert float(r.headers["X-Process-Time"]) >= 0


def test_openapi_documents_menu_routes(client):
    r = client.get("/openapi.json")
    assert r.status_code == 200
    paths = r.json()["paths"]
    assert "/api/menu-items" in paths
    assert "/api/menu-items/{item_id}" in paths
    assert "/api/search" in paths

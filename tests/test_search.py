"""
Tests for GET /api/search.

Covers case-insensitive substring matching, pagination math
(hasMore = offset + limit < total) and parameter validation.
"""

import pytest

from repositories import MenuItemRepository
from test_fixtures import client, seed_items


def test_search_is_case_insensitive(client):
    r = client.post("/api/menu-items", json={"name": "Pizza"})
    assert r.status_code == 201

    r2 = client.get("/api/search", params={"q": "Piz"})
    assert r2.status_code == 200
    body = r2.json()
    assert body["query"] == "Piz"
    assert body["count"] == 1
    assert body["results"][0]["name"] == "Pizza"
    assert body["pagination"] == {
        "total": 1,
        "count": 1,
        "limit": 20,
        "offset": 0,
        "hasMore": False,
    }

    r3 = client.get("/api/search", params={"q": "IZZ"})
    assert r3.json()["count"] == 1


def test_search_substring_matches_only(client):
    seed_items(["Pizza", "Pizza Deluxe", "Lasagne", "Tiramisu"])

    body = client.get("/api/search", params={"q": "pizza"}).json()
    assert body["count"] == 2
    assert [item["name"] for item in body["results"]] == ["Pizza Deluxe", "Pizza"]

    assert client.get("/api/search", params={"q": "sushi"}).json()["count"] == 0


def test_search_treats_wildcards_literally(client):
    seed_items(["Pizza", "Menu 100% maison"])

    body = client.get("/api/search", params={"q": "0%"}).json()
    assert [item["name"] for item in body["results"]] == ["Menu 100% maison"]

    assert client.get("/api/search", params={"q": "z_"}).json()["count"] == 0


def test_search_pagination_has_more(client):
    seed_items([f"Pizza {i:03d}" for i in range(105)])

    r = client.get("/api/search", params={"q": "pizza", "limit": 100})
    assert r.status_code == 200
    pagination = r.json()["pagination"]
    assert pagination["total"] == 105
    assert pagination["count"] == 100
    assert pagination["hasMore"] is True

    last = client.get("/api/search", params={"q": "pizza", "limit": 100, "offset": 100})
    assert last.json()["pagination"]["count"] == 5
    assert last.json()["pagination"]["hasMore"] is False


def test_search_accented_query_is_case_insensitive(client):
    seed_items(["Salade César", "Pizza"])

    body = client.get("/api/search", params={"q": "CÉSAR"}).json()
    assert [item["name"] for item in body["results"]] == ["Salade César"]


def test_search_offset_beyond_integer_range(client):
    seed_items(["Pizza"])

    r = client.get("/api/search", params={"q": "pizza", "offset": "99999999999999999999"})
    assert r.status_code == 200
    body = r.json()
    assert body["results"] == []
    assert body["pagination"]["total"] == 1
    assert body["pagination"]["offset"] == 99999999999999999999
    assert body["pagination"]["hasMore"] is False


def test_search_offset_past_end(client):
    seed_items(["Pizza"])

    body = client.get("/api/search", params={"q": "pizza", "offset": 10}).json()
    assert body["results"] == []
    assert body["pagination"]["total"] == 1
    assert body["pagination"]["hasMore"] is False


@pytest.mark.parametrize(
    "params, message",
    [
        ({}, "Search query is required"),
        ({"q": ""}, "Search query is required"),
        ({"q": "   "}, "Search query is required"),
        ({"q": "P"}, "Search query must be at least 2 characters long"),
        ({"q": "Pizza", "limit": 101}, "Limit cannot exceed 100"),
        ({"q": "Pizza", "limit": 0}, "Limit must be a positive integer"),
        ({"q": "Pizza", "limit": "ten"}, "Limit must be a positive integer"),
        ({"q": "Pizza", "offset": -1}, "Offset must be a non-negative integer"),
    ],
)
def test_search_rejects_invalid_params_without_store_access(client, monkeypatch, params, message):
    calls = []
    monkeypatch.setattr(
        MenuItemRepository, "search", lambda self, *a, **k: calls.append(a)
    )

    r = client.get("/api/search", params=params)
    assert r.status_code == 400
    assert r.json()["error"] == message
    assert r.json()["type"] == "VALIDATION_ERROR"
    assert calls == []

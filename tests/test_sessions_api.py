"""HTTP tests for /api/sessions backed by the in-memory repository."""

from __future__ import annotations

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from app.controllers.dependencies import get_session_repository
from app.main import app


@pytest.fixture
def client(repository):
    app.dependency_overrides[get_session_repository] = lambda: repository

    yield TestClient(app)

    app.dependency_overrides.clear()


def _create(client: TestClient, **fields) -> dict:
    body = {"audio_url": "s3://bucket/take.webm", **fields}
    response = client.post("/api/sessions/", json=body)
    assert response.status_code == 201
    return response.json()["data"]


def test_create_requires_audio_url(client):
    response = client.post("/api/sessions/", json={"score": 80})

    assert response.status_code == 422


def test_create_and_fetch(client):
    created = _create(client, user_id="singer-1", score=88, pitch_data={"notes": []})

    response = client.get(f"/api/sessions/{created['id']}")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["score"] == 88
    assert data["pitch_data"] == {"notes": []}
    assert data["user_id"] == "singer-1"


def test_list_is_newest_first_and_paginated(client):
    first = _create(client, user_id="singer-1")
    second = _create(client, user_id="singer-1")
    _create(client, user_id="someone-else")

    response = client.get("/api/sessions/", params={"user_id": "singer-1", "limit": 1})

    payload = response.json()
    assert payload["count"] == 1
    assert payload["pagination"] == {"limit": 1, "offset": 0}
    assert payload["data"][0]["id"] == second["id"]

    response = client.get(
        "/api/sessions/", params={"user_id": "singer-1", "limit": 1, "offset": 1}
    )
    assert response.json()["data"][0]["id"] == first["id"]


def test_update_is_partial_and_keeps_id(client):
    created = _create(client, score=50, feedback="old")

    response = client.put(
        f"/api/sessions/{created['id']}",
        json={"feedback": "new", "id": str(uuid4())},
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["id"] == created["id"]
    assert data["feedback"] == "new"
    assert data["score"] == 50


def test_missing_session_returns_404(client):
    missing = uuid4()

    assert client.get(f"/api/sessions/{missing}").status_code == 404
    assert client.put(f"/api/sessions/{missing}", json={"score": 1}).status_code == 404
    response = client.delete(f"/api/sessions/{missing}")
    assert response.status_code == 404
    assert response.json() == {"success": False, "detail": "Session not found"}


def test_delete_session(client):
    created = _create(client)

    response = client.delete(f"/api/sessions/{created['id']}")

    assert response.status_code == 200
    assert response.json()["success"] is True
    assert client.get(f"/api/sessions/{created['id']}").status_code == 404


def test_user_stats(client):
    _create(client, user_id="singer-1", score=80, duration_seconds=120)
    _create(client, user_id="singer-1", duration_seconds=60)
    _create(client, user_id="singer-1", score=100, duration_seconds=180)
    _create(client, user_id="someone-else", score=10, duration_seconds=999)

    response = client.get("/api/sessions/user/singer-1/stats")

    assert response.status_code == 200
    assert response.json()["data"] == {
        "total_sessions": 3,
        "average_score": 90.0,
        "best_score": 100.0,
        "total_practice_time_seconds": 360,
        "total_practice_time_minutes": 6,
    }


def test_stats_for_unknown_user_are_zero(client):
    response = client.get("/api/sessions/user/nobody/stats")

    assert response.json()["data"]["total_sessions"] == 0
    assert response.json()["data"]["average_score"] == 0

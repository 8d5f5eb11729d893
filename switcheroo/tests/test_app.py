"""
Tests for the FastAPI endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from ..api.app import create_app
from ..api.service import APIService
from .conftest import A1, S1, SP, BR, STANDARD_BOARD, EMPTY_SPACE


@pytest.fixture
def service():
    return APIService()


@pytest.fixture
def client(service):
    return TestClient(create_app(service))


@pytest.fixture
def session_id(client, service, make_state):
    """A session whose table is hand-placed: barrier at (0, 0)."""
    session_id = client.post("/api/v1/sessions", json={"seed": 2}).json()["session_id"]
    board = ((BR, S1, SP),) + STANDARD_BOARD[1:]
    space = ((None, None, None), (A1, None, None))
    service.session_manager.get_session(session_id).game_state = make_state(
        board=board, spaces=(space, EMPTY_SPACE), turn_count=(2, 2),
    )
    return session_id


class TestSystemEndpoints:
    """Health and root."""

    def test_health(self, client):
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root(self, client):
        assert client.get("/").json()["name"] == "Switcheroo Engine API"


class TestSessionEndpoints:
    """Session CRUD."""

    def test_create_without_body(self, client):
        response = client.post("/api/v1/sessions")

        assert response.status_code == 200
        assert response.json()["status"] == "active"

    def test_get_and_list(self, client):
        session_id = client.post("/api/v1/sessions", json={}).json()["session_id"]

        assert client.get(f"/api/v1/sessions/{session_id}").status_code == 200
        assert client.get(f"/api/v1/sessions/{session_id}/state").json()["moves_left"] == 2

        listing = client.get("/api/v1/sessions").json()
        assert listing["count"] == 1
        assert listing["sessions"] == [session_id]

    def test_unknown_session_is_404(self, client):
        response = client.get("/api/v1/sessions/nope")

        assert response.status_code == 404
        assert response.json()["error_code"] == "SESSION_NOT_FOUND"

    def test_delete(self, client):
        session_id = client.post("/api/v1/sessions").json()["session_id"]

        assert client.delete(f"/api/v1/sessions/{session_id}").json()["success"]
        assert client.get(f"/api/v1/sessions/{session_id}").status_code == 404


class TestCommandEndpoints:
    """Select, spend, end-turn and restart over HTTP."""

    def test_select_and_swap(self, client, session_id):
        url = f"/api/v1/sessions/{session_id}/select"
        first = client.post(url, json={"area": "board", "row": 3, "col": 0})
        second = client.post(url, json={"area": "board", "row": 3, "col": 1})

        assert first.status_code == 200
        assert first.json()["game_state"]["selection"] == {"row": 3, "col": 0}
        body = second.json()
        assert body["game_state"]["moves_left"] == 1
        assert body["game_state"]["board"][3][0]["label"] == "-1"

    def test_rejection_is_409(self, client, session_id):
        response = client.post(
            f"/api/v1/sessions/{session_id}/select",
            json={"area": "board", "row": 0, "col": 0},
        )

        assert response.status_code == 409
        body = response.json()
        assert body["error_code"] == "BARRIER_NOT_SELECTABLE"
        assert body["error"] == "Can't move barriers!"
        assert body["game_state"]["board"][0][0]["kind"] == "barrier"

    def test_malformed_body_is_422(self, client, session_id):
        response = client.post(
            f"/api/v1/sessions/{session_id}/select",
            json={"area": "space", "row": 0, "col": 0},
        )
        assert response.status_code == 422

    def test_spend_attack(self, client, session_id):
        response = client.post(
            f"/api/v1/sessions/{session_id}/spend",
            json={"player": 0, "row": 1, "col": 0},
        )

        assert response.status_code == 200
        assert response.json()["game_state"]["hearts"] == [3, 2]

    def test_end_turn_then_restart(self, client, session_id):
        response = client.post(f"/api/v1/sessions/{session_id}/end-turn")
        assert response.json()["game_state"]["turn_banner"] == "Player 2's Turn"

        response = client.post(f"/api/v1/sessions/{session_id}/restart")
        assert response.status_code == 200
        assert response.json()["game_state"]["turn_count"] == [0, 0]

    def test_command_on_unknown_session(self, client):
        response = client.post("/api/v1/sessions/nope/end-turn")
        assert response.status_code == 404

"""
Tests for API layer.

Tests:
- API service methods
- Snapshot serialization
- Session lifecycle via API
- Error handling
"""

import pytest

from ..api.schemas import (
    CommandResponse,
    CreateSessionRequest,
    ErrorCode,
    ErrorResponse,
    SelectRequest,
    SessionStatus,
    SpendRequest,
)
from ..api.service import APIService
from .conftest import S1, EMPTY_SPACE


class TestAPIService:
    """Tests for APIService session handling."""

    @pytest.fixture
    def service(self):
        """Create a fresh API service."""
        return APIService()

    def test_create_session(self, service):
        response = service.create_session(CreateSessionRequest(seed=4))

        assert response.session_id
        assert response.status == SessionStatus.ACTIVE
        assert len(response.game_state.board) == 4
        assert all(len(row) == 3 for row in response.game_state.board)
        assert response.game_state.hearts == [3, 3]
        assert response.game_state.turn_banner == "Player 1's Turn"
        assert len(response.legend) == 6

    def test_seeded_sessions_match(self, service):
        first = service.create_session(CreateSessionRequest(seed=4))
        second = service.create_session(CreateSessionRequest(seed=4))
        assert first.game_state.board == second.game_state.board

    def test_get_session(self, service):
        created = service.create_session(CreateSessionRequest())
        response = service.get_session(created.session_id)
        assert response.session_id == created.session_id

    def test_get_nonexistent_session(self, service):
        """Getting nonexistent session returns error."""
        response = service.get_session("nonexistent-id")

        assert isinstance(response, ErrorResponse)
        assert response.error_code == ErrorCode.SESSION_NOT_FOUND

    def test_end_session(self, service):
        session_id = service.create_session(CreateSessionRequest()).session_id

        assert service.end_session(session_id)
        assert isinstance(service.get_session(session_id), ErrorResponse)

    def test_list_sessions(self, service):
        ids = [service.create_session(CreateSessionRequest()).session_id for _ in range(3)]
        assert set(service.list_sessions()) == set(ids)

    def test_get_game_state(self, service):
        session_id = service.create_session(CreateSessionRequest(seed=1)).session_id
        state = service.get_game_state(session_id)

        assert state.session_id == session_id
        assert state.deck_remaining == 48


class TestAPICommands:
    """Commands through the service, on a hand-placed table."""

    @pytest.fixture
    def service(self):
        return APIService()

    @pytest.fixture
    def session_id(self, service, make_state):
        session_id = service.create_session(CreateSessionRequest()).session_id
        space = ((None, None, None), (S1, None, None))
        service.session_manager.get_session(session_id).game_state = make_state(
            spaces=(space, EMPTY_SPACE), hearts=(2, 3),
        )
        return session_id

    def test_select_board(self, service, session_id):
        response = service.select(session_id, SelectRequest(area="board", row=3, col=1))

        assert isinstance(response, CommandResponse)
        assert response.game_state.selection.row == 3
        assert response.game_state.selection.col == 1
        targets = {(t.row, t.col) for t in response.game_state.extraction_targets}
        assert targets == {(0, 1), (1, 1)}

    def test_extract(self, service, session_id):
        service.select(session_id, SelectRequest(area="board", row=3, col=1))
        response = service.select(session_id, SelectRequest(area="space", player=0, row=1, col=1))

        assert response.success
        assert response.game_state.moves_left == 1
        assert response.game_state.player_spaces[0][1][1].label == "-1"
        assert response.changes[0].startswith("Player 1 takes")

    def test_rejection_carries_state(self, service, session_id):
        service.select(session_id, SelectRequest(area="board", row=2, col=1))
        response = service.select(session_id, SelectRequest(area="space", player=0, row=1, col=1))

        assert isinstance(response, ErrorResponse)
        assert response.error_code == ErrorCode.NOT_EDGE_ROW
        assert response.game_state.selection is None

    def test_spend(self, service, session_id):
        response = service.spend(session_id, SpendRequest(player=0, row=1, col=0))

        assert response.game_state.hearts == [3, 3]
        assert response.game_state.player_spaces[0][1][0] is None

    def test_end_turn_and_restart(self, service, session_id):
        response = service.end_turn(session_id)
        assert response.game_state.current_player == 1

        response = service.restart(session_id)
        assert response.game_state.current_player == 0
        assert response.game_state.hearts == [3, 3]
        assert response.changes == ["New game"]

    def test_commands_on_missing_session(self, service):
        for response in (
            service.select("nope", SelectRequest(area="board", row=0, col=0)),
            service.spend("nope", SpendRequest(player=0, row=0, col=0)),
            service.end_turn("nope"),
            service.restart("nope"),
        ):
            assert response.error_code == ErrorCode.SESSION_NOT_FOUND

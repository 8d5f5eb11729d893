"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API requests to session commands
2. Manages sessions
3. Formats snapshots and rejections for the client

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .schemas import (
    # Requests
    CreateSessionRequest,
    SelectRequest,
    SpendRequest,
    # Responses
    CommandResponse,
    ErrorResponse,
    GameStateResponse,
    SessionResponse,
    # Shared
    CardInfo,
    CellInfo,
    LegendEntry,
    SpaceCellInfo,
    # Enums
    ErrorCode,
    SessionStatus,
)
from ..engine_core.action import ActionResult
from ..engine_core.board import BoardCoord, PlayerSpaceCoord
from ..engine_core.snapshot import CardView, Snapshot, legend
from ..session import Session, SessionManager


@dataclass
class APIService:
    """
    Main API service.

    Usage:
        service = APIService()

        # Create session
        session_response = service.create_session(CreateSessionRequest(seed=7))

        # Click a board cell
        result = service.select(session_id, SelectRequest(area="board", row=3, col=1))
    """
    session_manager: SessionManager = field(default_factory=SessionManager)

    def create_session(self, request: CreateSessionRequest) -> SessionResponse:
        """Create a new game session with a freshly dealt board."""
        session = self.session_manager.create_session(seed=request.seed)
        return self._session_to_response(session)

    def get_session(self, session_id: str) -> SessionResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        return self._session_to_response(session)

    def end_session(self, session_id: str) -> bool:
        return self.session_manager.end_session(session_id)

    def list_sessions(self) -> list[str]:
        return self.session_manager.list_active_sessions()

    def get_game_state(self, session_id: str) -> GameStateResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        return self._snapshot_to_response(session_id, session.snapshot())

    # =========================================================================
    # Commands
    # =========================================================================

    def select(self, session_id: str, request: SelectRequest) -> CommandResponse | ErrorResponse:
        """Click a board cell or a player-space cell."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)

        if request.area == "board":
            target = BoardCoord(request.row, request.col)
        else:
            target = PlayerSpaceCoord(request.player, request.row, request.col)
        return self._to_command_response(session_id, session.select_or_act(target))

    def spend(self, session_id: str, request: SpendRequest) -> CommandResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        result = session.spend_card(request.player, request.row, request.col)
        return self._to_command_response(session_id, result)

    def end_turn(self, session_id: str) -> CommandResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        return self._to_command_response(session_id, session.end_turn())

    def restart(self, session_id: str) -> CommandResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        return self._to_command_response(session_id, session.restart())

    # =========================================================================
    # Conversion helpers
    # =========================================================================

    def _not_found(self, session_id: str) -> ErrorResponse:
        return ErrorResponse(
            error="Session not found",
            error_code=ErrorCode.SESSION_NOT_FOUND,
            details={"session_id": session_id},
        )

    def _to_command_response(self, session_id: str, result: ActionResult) -> CommandResponse | ErrorResponse:
        game_state = self._snapshot_to_response(session_id, result.snapshot)
        if not result.success:
            return ErrorResponse(
                error=result.error or "Command rejected",
                error_code=ErrorCode(result.error_code.value),
                game_state=game_state,
            )
        return CommandResponse(
            session_id=session_id,
            changes=result.state_changes,
            game_state=game_state,
        )

    def _session_to_response(self, session: Session) -> SessionResponse:
        snapshot = session.snapshot()
        return SessionResponse(
            session_id=session.session_id,
            status=self._status(snapshot),
            created_at=session.created_at,
            game_state=self._snapshot_to_response(session.session_id, snapshot),
            legend=[
                LegendEntry(label=label, description=text)
                for label, text in legend(session.game_state.config.deck_distribution)
            ],
        )

    def _status(self, snapshot: Snapshot) -> SessionStatus:
        return SessionStatus.GAME_OVER if snapshot.game_over else SessionStatus.ACTIVE

    def _snapshot_to_response(self, session_id: str, snapshot: Snapshot) -> GameStateResponse:
        def cards(rows: tuple[tuple[CardView | None, ...], ...]) -> list[list[CardInfo | None]]:
            return [
                [CardInfo.model_validate(view) if view else None for view in row]
                for row in rows
            ]

        selection = None
        if snapshot.selection is not None:
            selection = CellInfo(row=snapshot.selection.row, col=snapshot.selection.col)

        return GameStateResponse(
            session_id=session_id,
            status=self._status(snapshot),
            board=cards(snapshot.board),
            player_spaces=[cards(space) for space in snapshot.player_spaces],
            hearts=list(snapshot.hearts),
            max_hearts=snapshot.max_hearts,
            current_player=snapshot.current_player,
            moves_left=snapshot.moves_left,
            turn_count=list(snapshot.turn_count),
            selection=selection,
            extraction_targets=[
                SpaceCellInfo(player=t.player, row=t.row, col=t.col)
                for t in snapshot.extraction_targets
            ],
            game_over=snapshot.game_over,
            winner=snapshot.winner,
            turn_banner=snapshot.turn_banner,
            result_banner=snapshot.result_banner,
            deck_remaining=snapshot.deck_remaining,
        )

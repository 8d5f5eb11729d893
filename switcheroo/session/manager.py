"""
Session Manager - Creates and manages game sessions.

LIFECYCLE:
1. Presentation layer starts a session -> a fresh match is dealt
2. During the match:
   - Every click / spend / end-turn becomes an Action
   - The session runs it through the reducer
   - On success the session adopts the new state
   - The caller renders the returned snapshot
3. Restart replaces the match inside the same session
4. Session ends -> state dropped

PERSISTENCE RULES:
- Sessions are in-memory only
- The session is the single owner of its GameState; callers only ever
  receive snapshots
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import time
import uuid

from ..engine_core.action import Action, ActionResult
from ..engine_core.board import BoardCoord, PlayerSpaceCoord
from ..engine_core.config import GameConfig, DEFAULT_CONFIG
from ..engine_core.lifecycle import new_game
from ..engine_core.reducer import Reducer
from ..engine_core.snapshot import Snapshot
from ..engine_core.state import GameState
from ..utils.logging_config import get_logger

logger = get_logger(__name__)


class SessionState(Enum):
    """State of a game session."""
    ACTIVE = "active"  # Match in progress
    GAME_OVER = "game_over"  # A winner is known, waiting for restart
    ENDED = "ended"  # Session closed


@dataclass
class Session:
    """
    One match and its owner.

    Contains:
    - The current canonical game state
    - The reducer that advances it
    - A log of accepted actions (for replay/debugging)
    """
    session_id: str
    game_state: GameState
    created_at: float = field(default_factory=time.time)
    reducer: Reducer = field(default_factory=Reducer)
    action_history: list[Action] = field(default_factory=list)
    ended: bool = False

    @classmethod
    def start(
        cls,
        config: GameConfig = DEFAULT_CONFIG,
        seed: int | None = None,
        session_id: str | None = None,
    ) -> Session:
        session_id = session_id or str(uuid.uuid4())
        state = new_game(config=config, seed=seed, game_id=session_id)
        return cls(session_id=session_id, game_state=state)

    @property
    def state(self) -> SessionState:
        if self.ended:
            return SessionState.ENDED
        if self.game_state.game_over:
            return SessionState.GAME_OVER
        return SessionState.ACTIVE

    def is_active(self) -> bool:
        return not self.ended

    def snapshot(self) -> Snapshot:
        return Snapshot.from_state(self.game_state)

    def apply(self, action: Action) -> ActionResult:
        """
        Run one command to completion.

        The session adopts whatever state the result carries, which
        includes rejections that only clear the selection.
        """
        result = self.reducer.apply(self.game_state, action)
        if result.new_state is not None:
            self.game_state = result.new_state
        if result.success:
            self.action_history.append(action)
        return result

    # Command API

    def select_or_act(self, target: BoardCoord | PlayerSpaceCoord) -> ActionResult:
        return self.apply(Action.select(target))

    def spend_card(self, player: int, row: int, col: int) -> ActionResult:
        return self.apply(Action.spend(player, row, col))

    def end_turn(self) -> ActionResult:
        return self.apply(Action.end_turn())

    def restart(self) -> ActionResult:
        result = self.apply(Action.restart())
        self.action_history = [Action.restart()]
        return result


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions
    - Track active sessions
    - Clean up ended or stale sessions

    No persistence - sessions are in-memory only.
    """

    def __init__(self, config: GameConfig = DEFAULT_CONFIG):
        self.config = config
        self._sessions: dict[str, Session] = {}

    def create_session(self, seed: int | None = None) -> Session:
        """Create a new session with a freshly dealt match."""
        session = Session.start(config=self.config, seed=seed)
        self._sessions[session.session_id] = session
        logger.info("Created session %s", session.session_id)
        return session

    def get_session(self, session_id: str) -> Session | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def end_session(self, session_id: str) -> bool:
        """
        End a session and drop its state.

        Returns False if no such session existed.
        """
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        session.ended = True
        logger.info("Ended session %s", session_id)
        return True

    def list_active_sessions(self) -> list[str]:
        """List IDs of active sessions."""
        return [
            sid for sid, session in self._sessions.items()
            if session.is_active()
        ]

    def cleanup_stale_sessions(self, max_age_seconds: int = 3600) -> int:
        """
        End sessions older than max_age whose match is finished.

        Returns the number of sessions removed.
        """
        current_time = time.time()
        to_remove = [
            session_id for session_id, session in self._sessions.items()
            if current_time - session.created_at > max_age_seconds
            and session.state == SessionState.GAME_OVER
        ]
        for session_id in to_remove:
            self.end_session(session_id)
        return len(to_remove)

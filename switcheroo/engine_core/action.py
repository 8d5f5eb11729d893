"""
Action System - Commands, payloads, and results.

Actions are the only way the presentation layer talks to the engine:
1. Select-or-act on a board or player-space cell
2. Spend a card resting in a player space
3. End the turn
4. Restart the match

Every action produces an ActionResult. Illegal commands come back as a
failed result with a RejectionCode; the engine never raises for them.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .board import BoardCoord, PlayerSpaceCoord


class ActionType(Enum):
    """Types of actions in the system."""
    SELECT = "select"
    SPEND = "spend"
    END_TURN = "end_turn"
    RESTART = "restart"


class RejectionCode(str, Enum):
    """Machine-readable reasons a command was refused."""
    GAME_OVER = "GAME_OVER"
    NO_MOVES_LEFT = "NO_MOVES_LEFT"
    OUT_OF_BOUNDS = "OUT_OF_BOUNDS"
    WRONG_PLAYER = "WRONG_PLAYER"
    BARRIER_NOT_SELECTABLE = "BARRIER_NOT_SELECTABLE"
    BARRIER_NOT_SWAPPABLE = "BARRIER_NOT_SWAPPABLE"
    WRONG_COLUMN = "WRONG_COLUMN"
    NOT_EDGE_ROW = "NOT_EDGE_ROW"
    COLUMN_FULL = "COLUMN_FULL"
    EMPTY_CELL = "EMPTY_CELL"
    UNSPENDABLE = "UNSPENDABLE"
    ATTACK_RESTRICTED = "ATTACK_RESTRICTED"
    IGNORED_TARGET = "IGNORED_TARGET"
    UNKNOWN_ACTION = "UNKNOWN_ACTION"


Target = BoardCoord | PlayerSpaceCoord


@dataclass(frozen=True)
class ActionPayload:
    """
    Payload for an action - contains the action parameters.

    Different action types use different fields; validation happens in
    the reducer.
    """
    target: Target | None = None

    # For spend
    player: int | None = None
    row: int | None = None
    col: int | None = None


@dataclass(frozen=True)
class Action:
    """A complete command to be applied to the game state."""
    action_type: ActionType
    payload: ActionPayload = field(default_factory=ActionPayload)

    @classmethod
    def select(cls, target: Target) -> Action:
        """Factory for a click on a board or player-space cell."""
        return cls(action_type=ActionType.SELECT, payload=ActionPayload(target=target))

    @classmethod
    def select_board(cls, row: int, col: int) -> Action:
        return cls.select(BoardCoord(row, col))

    @classmethod
    def select_space(cls, player: int, row: int, col: int) -> Action:
        return cls.select(PlayerSpaceCoord(player, row, col))

    @classmethod
    def spend(cls, player: int, row: int, col: int) -> Action:
        """Factory for spending a card from a player space."""
        return cls(
            action_type=ActionType.SPEND,
            payload=ActionPayload(player=player, row=row, col=col),
        )

    @classmethod
    def end_turn(cls) -> Action:
        return cls(action_type=ActionType.END_TURN)

    @classmethod
    def restart(cls) -> Action:
        return cls(action_type=ActionType.RESTART)

    def __str__(self) -> str:
        p = self.payload
        if self.action_type == ActionType.SELECT:
            return f"select {p.target}"
        if self.action_type == ActionType.SPEND:
            return f"spend space{p.player}({p.row},{p.col})"
        return self.action_type.value


@dataclass
class ActionResult:
    """
    Result of applying an action.

    Contains:
    - Whether action succeeded
    - New state (on success, and on rejections that clear the selection)
    - Error message and code (if rejected)
    - Human-readable changes for display
    """
    success: bool
    new_state: Any | None = None  # GameState
    error: str | None = None
    error_code: RejectionCode | None = None

    # For UI/presentation
    state_changes: list[str] = field(default_factory=list)
    snapshot: Any | None = None  # Snapshot, filled in by the reducer

    @property
    def state_changed(self) -> bool:
        return self.new_state is not None

    @classmethod
    def failure(
        cls,
        error: str,
        error_code: RejectionCode | None = None,
        state: Any | None = None,
    ) -> ActionResult:
        """
        Create a failure result.

        Pass `state` only when the rejection still changes something
        (clearing the selection).
        """
        return cls(success=False, new_state=state, error=error, error_code=error_code)

    @classmethod
    def success_with_state(
        cls,
        state: Any,
        changes: list[str] | None = None,
    ) -> ActionResult:
        """Create a success result with new state."""
        return cls(success=True, new_state=state, state_changes=changes or [])

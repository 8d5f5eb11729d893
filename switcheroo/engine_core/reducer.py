"""
Reducer - Applies actions to game state.

The reducer is the single point of state mutation.
All state changes must go through apply_action().

Design principles:
- Pure function: (state, action) -> ActionResult with the new state
- Validates before applying
- Rejections are results, never exceptions
- Delegates extraction, spending and lifecycle to their modules

Click protocol (only while moves remain and the game is running):

    Idle      + board cell (non-barrier)  -> Armed(cell)
    Armed(s)  + s                         -> Idle, free
    Armed(s)  + board cell t (barrier)    -> Idle, rejected, free
    Armed(s)  + board cell t              -> swap s/t, Idle, one move
    Armed(s)  + own empty space cell, col -> extraction if s is on the
                                             edge row in that column,
                                             otherwise rejected, Idle, free
    Armed(s)  + any cell of a full column -> COLUMN_FULL when s is a legal
                                             pull, Idle, free
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable

from .action import Action, ActionType, ActionResult, RejectionCode
from .board import BoardCoord, PlayerSpaceCoord
from .economy import resolve_spend
from .extraction import run_extraction
from .lifecycle import end_turn, restart
from .snapshot import Snapshot
from .state import GameState, Selection, IDLE
from ..utils.logging_config import get_logger

logger = get_logger(__name__)

Handler = Callable[[GameState, Action], ActionResult]


@dataclass
class Reducer:
    """
    Reducer applies actions to game state.

    Stateless - all state is in GameState.
    """

    def apply(self, state: GameState, action: Action) -> ActionResult:
        """
        Apply an action to the game state.

        Returns ActionResult with the new state and a snapshot, or a
        rejection. The snapshot always reflects the state the caller
        should render next.
        """
        validation_error = self._validate_action(state, action)
        if validation_error:
            return self._finish(state, action, validation_error)

        handler = self._get_handler(action.action_type)
        if not handler:
            result = ActionResult.failure(
                f"No handler for action type: {action.action_type}",
                error_code=RejectionCode.UNKNOWN_ACTION,
            )
            return self._finish(state, action, result)

        return self._finish(state, action, handler(state, action))

    def _finish(self, state: GameState, action: Action, result: ActionResult) -> ActionResult:
        if not result.success:
            logger.debug("Rejected %s: %s (%s)", action, result.error, result.error_code)
        result.snapshot = Snapshot.from_state(result.new_state or state)
        return result

    def _validate_action(self, state: GameState, action: Action) -> ActionResult | None:
        """
        Check the preconditions shared by every command of a type.

        Returns a failed result if invalid, None if valid.
        """
        if action.action_type == ActionType.RESTART:
            return None

        if state.game_over:
            return ActionResult.failure("Game is over - restart to play again", RejectionCode.GAME_OVER)

        if action.action_type == ActionType.SELECT and state.moves_left <= 0:
            return ActionResult.failure("No moves left this turn", RejectionCode.NO_MOVES_LEFT)

        return None

    def _get_handler(self, action_type: ActionType) -> Handler | None:
        """Get the handler function for an action type."""
        handlers = {
            ActionType.SELECT: self._handle_select,
            ActionType.SPEND: self._handle_spend,
            ActionType.END_TURN: self._handle_end_turn,
            ActionType.RESTART: self._handle_restart,
        }
        return handlers.get(action_type)

    # =========================================================================
    # Select / act
    # =========================================================================

    def _handle_select(self, state: GameState, action: Action) -> ActionResult:
        target = action.payload.target
        if isinstance(target, BoardCoord):
            if not state.board.in_bounds(target.row, target.col):
                return ActionResult.failure(f"{target} is off the board", RejectionCode.OUT_OF_BOUNDS)
            return self._click_board(state, target)

        if isinstance(target, PlayerSpaceCoord):
            if target.player not in (0, 1):
                return ActionResult.failure(f"No player {target.player}", RejectionCode.OUT_OF_BOUNDS)
            if not state.player_space(target.player).in_bounds(target.row, target.col):
                return ActionResult.failure(f"{target} is off the player space", RejectionCode.OUT_OF_BOUNDS)
            return self._click_space(state, target)

        return ActionResult.failure("Select needs a board or player-space cell", RejectionCode.UNKNOWN_ACTION)

    def _click_board(self, state: GameState, coord: BoardCoord) -> ActionResult:
        selection = state.selection

        if not selection.is_armed:
            card = state.board.at(coord.row, coord.col)
            if card is None:
                return ActionResult.failure("Nothing to select there", RejectionCode.EMPTY_CELL)
            if card.is_barrier:
                return ActionResult.failure("Can't move barriers!", RejectionCode.BARRIER_NOT_SELECTABLE)
            return ActionResult.success_with_state(
                state._copy_with(selection=Selection.armed(coord)),
                changes=[f"Selected {card.label} at {coord}"],
            )

        if coord == selection.coord:
            # Deselect without counting as a move
            return ActionResult.success_with_state(
                state._copy_with(selection=IDLE),
                changes=["Selection cleared"],
            )

        if state.board.is_barrier_at(coord.row, coord.col):
            return ActionResult.failure(
                "Can't move barriers!",
                RejectionCode.BARRIER_NOT_SWAPPABLE,
                state=state._copy_with(selection=IDLE),
            )

        new_state = state._copy_with(
            board=state.board.swap(selection.coord, coord),
            selection=IDLE,
            moves_left=state.moves_left - 1,
        )
        return ActionResult.success_with_state(
            new_state,
            changes=[f"Swapped {selection.coord} with {coord}"],
        )

    def _click_space(self, state: GameState, coord: PlayerSpaceCoord) -> ActionResult:
        player = state.current_player
        if coord.player != player:
            return ActionResult.failure(
                f"That space belongs to player {coord.player + 1}",
                RejectionCode.WRONG_PLAYER,
            )

        selection = state.selection
        if not selection.is_armed:
            return ActionResult.failure("Nothing to do there", RejectionCode.IGNORED_TARGET)

        source = selection.coord
        space = state.player_space(player)
        # Any cell of a full column reports the full column for a legal pull
        pulls_into_full_column = (
            source.col == coord.col
            and source.row == state.board.edge_row(player)
            and space.is_column_full(player, coord.col)
        )
        if not space.is_empty(coord.row, coord.col) and not pulls_into_full_column:
            return ActionResult.failure("Nothing to do there", RejectionCode.IGNORED_TARGET)

        cleared = state._copy_with(selection=IDLE)

        if source.col != coord.col:
            return ActionResult.failure("Must move to same column!", RejectionCode.WRONG_COLUMN, state=cleared)
        if source.row != state.board.edge_row(player):
            return ActionResult.failure("Can only move from edge row!", RejectionCode.NOT_EDGE_ROW, state=cleared)

        result = run_extraction(cleared, coord.col, player)
        if not result.success:
            result.new_state = cleared
            return result

        result.new_state = result.new_state._copy_with(moves_left=state.moves_left - 1)
        return result

    # =========================================================================
    # Spend / turn / restart
    # =========================================================================

    def _handle_spend(self, state: GameState, action: Action) -> ActionResult:
        payload = action.payload
        if payload.player not in (0, 1) or payload.row is None or payload.col is None:
            return ActionResult.failure("Spend needs a player, row and column", RejectionCode.OUT_OF_BOUNDS)
        if payload.player != state.current_player:
            return ActionResult.failure(
                f"It is player {state.current_player + 1}'s turn",
                RejectionCode.WRONG_PLAYER,
            )
        return resolve_spend(state, payload.player, payload.row, payload.col)

    def _handle_end_turn(self, state: GameState, action: Action) -> ActionResult:
        new_state = end_turn(state)
        return ActionResult.success_with_state(
            new_state,
            changes=[f"Player {new_state.current_player + 1}'s Turn"],
        )

    def _handle_restart(self, state: GameState, action: Action) -> ActionResult:
        logger.info("Restarting game %s", state.game_id)
        return ActionResult.success_with_state(restart(state), changes=["New game"])


def apply_action(state: GameState, action: Action) -> ActionResult:
    """
    Convenience function to apply an action.

    Creates a Reducer and applies the action.
    """
    reducer = Reducer()
    return reducer.apply(state, action)

"""
Extraction - Pulling a card off the board into a player space.

Pipeline for player p and column c:
1. Take the card on p's edge row in column c
2. Find the first free slot of column c in p's space (refuse if full)
3. Move the card there
4. Apply its arrival effect (instants heal and vanish)
5. Shift the board column toward p
6. Drop a freshly drawn card into the spawn row

Nothing here touches the move budget; the reducer charges the move
once the pipeline succeeds.
"""

from __future__ import annotations
from typing import Callable

from .action import ActionResult, RejectionCode
from .cards import Card, CardKind
from .columns import shift_column, find_spawn_row
from .economy import apply_instant
from .state import GameState

ArrivalHandler = Callable[[GameState, int, int, int, Card], tuple[GameState, list[str]]]


def _rest(state: GameState, player: int, row: int, col: int, card: Card) -> tuple[GameState, list[str]]:
    return state, []


def _consume_instant(state: GameState, player: int, row: int, col: int, card: Card) -> tuple[GameState, list[str]]:
    new_state, changes = apply_instant(state, player, card)
    space = new_state.player_space(player)
    return new_state.with_player_space(player, space.with_cell(row, col, None)), changes


ARRIVAL_HANDLERS: dict[CardKind, ArrivalHandler] = {
    CardKind.ATTACK: _rest,
    CardKind.SHIELD: _rest,
    CardKind.SPECIAL: _rest,
    CardKind.BOOST: _rest,
    CardKind.BARRIER: _rest,
    CardKind.INSTANT: _consume_instant,
}


def run_extraction(state: GameState, col: int, player: int) -> ActionResult:
    """
    Move the edge-row card of `col` into `player`'s space.

    Returns a failed result (state untouched) when the edge cell is
    empty or the player-space column is full.
    """
    edge = state.board.edge_row(player)
    card = state.board.at(edge, col)
    if card is None:
        return ActionResult.failure("No card on the edge row", error_code=RejectionCode.EMPTY_CELL)

    space = state.player_space(player)
    slot = space.find_empty_slot(player, col)
    if slot is None:
        return ActionResult.failure("Column is full!", error_code=RejectionCode.COLUMN_FULL)

    new_state = state.with_player_space(player, space.with_cell(slot, col, card))
    new_state = new_state._copy_with(board=new_state.board.with_cell(edge, col, None))
    changes = [f"Player {player + 1} takes {card.label} from column {col + 1}"]

    new_state, arrival_changes = ARRIVAL_HANDLERS[card.kind](new_state, player, slot, col, card)
    changes.extend(arrival_changes)

    board = shift_column(new_state.board, col, player)
    spawn_row = find_spawn_row(board, col, player)
    fresh, new_state = new_state.draw()
    new_state = new_state._copy_with(board=board.with_cell(spawn_row, col, fresh))

    return ActionResult.success_with_state(new_state, changes=changes)

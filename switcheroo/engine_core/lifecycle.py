"""
Lifecycle - Game setup, turn hand-off, win evaluation and restart.
"""

from __future__ import annotations
import random
import uuid

from .board import Board, PlayerSpace
from .cards import build_deck
from .config import GameConfig, DEFAULT_CONFIG
from .state import GameState, IDLE
from ..utils.logging_config import get_logger

logger = get_logger(__name__)


def init_board(state: GameState) -> GameState:
    """Fill every board cell with a freshly drawn card."""
    board = Board.empty(state.config.grid_rows, state.config.grid_cols)
    for row in range(board.height):
        for col in range(board.width):
            card, state = state.draw()
            board = board.with_cell(row, col, card)
    return state._copy_with(board=board)


def new_game(
    config: GameConfig = DEFAULT_CONFIG,
    seed: int | None = None,
    game_id: str | None = None,
) -> GameState:
    """
    Set up a new match.

    Args:
        config: Construction-time constants
        seed: Seed for deterministic shuffling (None for OS entropy)
        game_id: Identifier carried in snapshots (generated if omitted)

    Returns:
        Initial GameState: full board, empty player spaces, player 0 to move
    """
    rng = random.Random(seed)
    empty_space = PlayerSpace.empty(config.player_rows, config.player_cols)
    state = GameState(
        game_id=game_id or uuid.uuid4().hex[:12],
        board=Board.empty(config.grid_rows, config.grid_cols),
        player_spaces=(empty_space, empty_space),
        deck=build_deck(rng, config.deck_distribution),
        current_player=0,
        turn_count=(0, 0),
        moves_left=config.moves_per_turn,
        hearts=(config.max_hearts, config.max_hearts),
        selection=IDLE,
        game_over=False,
        winner=None,
        config=config,
        seed=seed,
        rng=rng,
    )
    state = init_board(state)
    logger.debug("New game %s (seed=%s)", state.game_id, seed)
    return state


def restart(state: GameState) -> GameState:
    """
    Replace the match wholesale: new deck, new board, hearts and counters reset.

    The config and game id carry over; the shuffle does not repeat the
    previous match's sequence.
    """
    rng = random.Random()
    rng.setstate(state.rng.getstate())
    seed = rng.randrange(2**32)
    return new_game(config=state.config, seed=seed, game_id=state.game_id)


def end_turn(state: GameState) -> GameState:
    """Clear the selection, hand over to the other player and reset moves."""
    next_player = state.opponent
    turn_count = list(state.turn_count)
    turn_count[next_player] += 1
    return state._copy_with(
        selection=IDLE,
        current_player=next_player,
        turn_count=tuple(turn_count),
        moves_left=state.config.moves_per_turn,
    )


def evaluate_winner(state: GameState) -> GameState:
    """
    Check terminal conditions after a heart change.

    Player 0 is checked first. Once set, the result sticks until restart.
    """
    if state.game_over:
        return state
    if state.hearts[0] <= 0:
        winner = 1
    elif state.hearts[1] <= 0:
        winner = 0
    else:
        return state
    logger.info("Game %s over: player %d wins", state.game_id, winner + 1)
    return state._copy_with(game_over=True, winner=winner, selection=IDLE)

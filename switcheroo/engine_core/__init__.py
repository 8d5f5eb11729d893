"""
Engine Core - Deterministic rule engine for Switcheroo.

The engine:
1. Builds the deck and deals the board
2. Owns GameState (immutable; every command yields a new one)
3. Runs the select/act click protocol and the extraction pipeline
4. Resolves spent cards and checks for a winner
5. Produces read-only snapshots for the presentation layer
"""

from .cards import Card, CardKind, Deck, DeckEntry, DEFAULT_DISTRIBUTION, build_deck
from .config import GameConfig, DEFAULT_CONFIG
from .board import Board, BoardCoord, PlayerSpace, PlayerSpaceCoord
from .columns import shift_column, find_spawn_row
from .state import GameState, Selection, SelectionState
from .action import Action, ActionType, ActionPayload, ActionResult, RejectionCode
from .lifecycle import new_game, restart, end_turn, evaluate_winner
from .snapshot import Snapshot, render_text, legend
from .reducer import Reducer, apply_action

__all__ = [
    "Card",
    "CardKind",
    "Deck",
    "DeckEntry",
    "DEFAULT_DISTRIBUTION",
    "build_deck",
    "GameConfig",
    "DEFAULT_CONFIG",
    "Board",
    "BoardCoord",
    "PlayerSpace",
    "PlayerSpaceCoord",
    "shift_column",
    "find_spawn_row",
    "GameState",
    "Selection",
    "SelectionState",
    "Action",
    "ActionType",
    "ActionPayload",
    "ActionResult",
    "RejectionCode",
    "new_game",
    "restart",
    "end_turn",
    "evaluate_winner",
    "Snapshot",
    "render_text",
    "legend",
    "Reducer",
    "apply_action",
]

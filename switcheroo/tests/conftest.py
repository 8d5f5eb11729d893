"""
Pytest fixtures for Switcheroo tests.
"""

import pytest

from ..engine_core.board import Board, PlayerSpace
from ..engine_core.cards import Card, CardKind
from ..engine_core.lifecycle import new_game
from ..engine_core.state import GameState

# Card shorthands used across the tests
A1 = Card(CardKind.ATTACK, 1)
A2 = Card(CardKind.ATTACK, 2)
S1 = Card(CardKind.SHIELD, 1)
SP = Card(CardKind.SPECIAL, 0)
I1 = Card(CardKind.INSTANT, 1)
BO = Card(CardKind.BOOST, 1)
BR = Card(CardKind.BARRIER, 0)

# A fully dealt board without barriers, top row first
STANDARD_BOARD = (
    (A1, S1, SP),
    (A2, I1, A1),
    (S1, A2, BO),
    (SP, A1, S1),
)

EMPTY_SPACE = (
    (None, None, None),
    (None, None, None),
)


def as_rows(grid) -> tuple:
    return tuple(tuple(row) for row in grid)


@pytest.fixture
def fresh_game() -> GameState:
    """A newly dealt, seeded match."""
    return new_game(seed=7, game_id="test_game")


@pytest.fixture
def make_state():
    """
    Factory for states with a hand-placed table.

    The deck and random generator come from a seeded deal, so the next
    drawn card is always state.deck.cards[-1].
    """
    def _make(board=STANDARD_BOARD, spaces=(EMPTY_SPACE, EMPTY_SPACE), **fields) -> GameState:
        state = new_game(seed=11, game_id="test_game")
        state = state._copy_with(
            board=Board(rows=as_rows(board)),
            player_spaces=tuple(PlayerSpace(rows=as_rows(space)) for space in spaces),
        )
        if fields:
            state = state._copy_with(**fields)
        return state

    return _make


"""
Game State - The aggregate root for one match.

Design principles:
- Immutable: all mutations return new state
- Explicitly owned: a Session holds the current state, nothing global
- Self-contained: the deck, the random generator and the config
  travel with the state so any state can be replayed forward
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum
import random

from .board import Board, BoardCoord, PlayerSpace
from .cards import Card, Deck
from .config import GameConfig, DEFAULT_CONFIG


class SelectionState(Enum):
    """The two states of the click protocol."""
    IDLE = "idle"  # Nothing selected
    ARMED = "armed"  # A board cell waits for a second click


@dataclass(frozen=True)
class Selection:
    """Current selection. Armed always carries a non-barrier board cell."""
    state: SelectionState = SelectionState.IDLE
    coord: BoardCoord | None = None

    @classmethod
    def idle(cls) -> Selection:
        return cls()

    @classmethod
    def armed(cls, coord: BoardCoord) -> Selection:
        return cls(state=SelectionState.ARMED, coord=coord)

    @property
    def is_armed(self) -> bool:
        return self.state == SelectionState.ARMED


IDLE = Selection.idle()


@dataclass(frozen=True)
class GameState:
    """
    Complete game state at a point in time.

    This is the canonical state that the engine operates on.
    All state changes go through the reducer.
    """
    game_id: str
    board: Board
    player_spaces: tuple[PlayerSpace, PlayerSpace]
    deck: Deck

    current_player: int = 0
    turn_count: tuple[int, int] = (0, 0)
    moves_left: int = 2
    hearts: tuple[int, int] = (3, 3)
    selection: Selection = IDLE

    game_over: bool = False
    winner: int | None = None

    config: GameConfig = DEFAULT_CONFIG
    seed: int | None = None
    # Shuffle source; forked on every draw so older states never change
    rng: random.Random = field(default_factory=random.Random, compare=False, repr=False)

    @staticmethod
    def opponent_of(player: int) -> int:
        return 1 - player

    @property
    def opponent(self) -> int:
        return self.opponent_of(self.current_player)

    def player_space(self, player: int) -> PlayerSpace:
        return self.player_spaces[player]

    def with_player_space(self, player: int, space: PlayerSpace) -> GameState:
        """Return new state with one player space replaced."""
        spaces = list(self.player_spaces)
        spaces[player] = space
        return self._copy_with(player_spaces=tuple(spaces))

    def with_hearts(self, player: int, value: int) -> GameState:
        """Return new state with a player's hearts set, clamped to [0, max]."""
        clamped = max(0, min(self.config.max_hearts, value))
        hearts = list(self.hearts)
        hearts[player] = clamped
        return self._copy_with(hearts=tuple(hearts))

    def draw(self) -> tuple[Card, GameState]:
        """Draw one card, returning (card, new state)."""
        rng = random.Random()
        rng.setstate(self.rng.getstate())
        card, deck = self.deck.draw(rng, self.config.deck_distribution)
        return card, self._copy_with(deck=deck, rng=rng)

    def _copy_with(self, **kwargs) -> GameState:
        """Create a copy with some fields replaced."""
        return replace(self, **kwargs)

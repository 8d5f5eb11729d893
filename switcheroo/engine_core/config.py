"""
Game Config - Construction-time constants for a match.

Nothing here is runtime-configurable: a config is fixed when a
GameState is created and travels with every action applied to it.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .cards import CardKind, DeckEntry, DEFAULT_DISTRIBUTION


@dataclass(frozen=True)
class GameConfig:
    """Grid sizes, budgets and the deck distribution table."""
    grid_rows: int = 4
    grid_cols: int = 3
    player_rows: int = 2
    max_hearts: int = 3
    moves_per_turn: int = 2
    no_attack_turns: int = 2
    deck_distribution: tuple[DeckEntry, ...] = field(default=DEFAULT_DISTRIBUTION)

    def __post_init__(self):
        if self.grid_rows < 2 or self.grid_cols < 1:
            raise ValueError("Grid needs at least 2 rows and 1 column")
        if self.player_rows < 1:
            raise ValueError("Player space needs at least 1 row")
        if self.max_hearts < 1:
            raise ValueError("max_hearts must be positive")
        if self.moves_per_turn < 1:
            raise ValueError("moves_per_turn must be positive")
        if self.no_attack_turns < 0:
            raise ValueError("no_attack_turns cannot be negative")
        if not any(entry.count > 0 for entry in self.deck_distribution):
            raise ValueError("Deck distribution must contain at least one card")
        for entry in self.deck_distribution:
            if entry.count < 0 or entry.value < 0:
                raise ValueError(f"Invalid deck entry: {entry}")

    @property
    def player_cols(self) -> int:
        # Player space columns mirror the board columns 1:1
        return self.grid_cols

    @property
    def deck_size(self) -> int:
        return sum(entry.count for entry in self.deck_distribution)

    def count_of(self, kind: CardKind) -> int:
        """Number of cards of a kind in one full deck."""
        return sum(e.count for e in self.deck_distribution if e.kind == kind)


DEFAULT_CONFIG = GameConfig()

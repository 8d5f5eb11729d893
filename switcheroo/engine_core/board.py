"""
Board State - The shared grid and the two player spaces.

Layout (default config):

    player 1 space   rows 0-1, cols 0-2   (above the board)
    board            rows 0-3, cols 0-2
    player 0 space   rows 0-1, cols 0-2   (below the board)

Player 0 sits at the bottom of the board, so its edge row is the last
board row; player 1's edge row is row 0. A player-space column lines
up with the board column of the same index.

Design principles:
- Immutable: every mutation returns a new grid
- Cells hold at most one card; None means empty
- Coordinates outside the grid are answered, never raised
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator

from .cards import Card

Cell = Card | None
Rows = tuple[tuple[Cell, ...], ...]


@dataclass(frozen=True)
class BoardCoord:
    """A cell on the shared board."""
    row: int
    col: int

    def __str__(self) -> str:
        return f"board({self.row},{self.col})"


@dataclass(frozen=True)
class PlayerSpaceCoord:
    """A cell in one player's private space."""
    player: int
    row: int
    col: int

    def __str__(self) -> str:
        return f"space{self.player}({self.row},{self.col})"


@dataclass(frozen=True)
class Grid:
    """Fixed-size matrix of optional cards."""
    rows: Rows

    @classmethod
    def empty(cls, height: int, width: int) -> Grid:
        return cls(rows=tuple(tuple(None for _ in range(width)) for _ in range(height)))

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def at(self, row: int, col: int) -> Cell:
        """Card at (row, col), None if empty or outside the grid."""
        if not self.in_bounds(row, col):
            return None
        return self.rows[row][col]

    def is_empty(self, row: int, col: int) -> bool:
        return self.at(row, col) is None

    def column(self, col: int) -> tuple[Cell, ...]:
        return tuple(row[col] for row in self.rows)

    def cells(self) -> Iterator[tuple[int, int, Cell]]:
        for r, row in enumerate(self.rows):
            for c, card in enumerate(row):
                yield r, c, card

    def occupied_count(self) -> int:
        return sum(1 for _, _, card in self.cells() if card is not None)

    def with_cell(self, row: int, col: int, card: Cell) -> Grid:
        """Return new grid with one cell replaced."""
        new_row = self.rows[row][:col] + (card,) + self.rows[row][col + 1:]
        return type(self)(rows=self.rows[:row] + (new_row,) + self.rows[row + 1:])

    def with_column(self, col: int, cells: tuple[Cell, ...]) -> Grid:
        """Return new grid with a whole column replaced (top to bottom)."""
        if len(cells) != self.height:
            raise ValueError(f"Column needs {self.height} cells, got {len(cells)}")
        new_rows = tuple(
            row[:col] + (cells[r],) + row[col + 1:]
            for r, row in enumerate(self.rows)
        )
        return type(self)(rows=new_rows)


@dataclass(frozen=True)
class Board(Grid):
    """The shared 4x3 board."""

    def is_barrier_at(self, row: int, col: int) -> bool:
        card = self.at(row, col)
        return card is not None and card.is_barrier

    def edge_row(self, player: int) -> int:
        """The board row adjacent to a player's space."""
        return self.height - 1 if player == 0 else 0

    def rows_from_edge(self, player: int) -> range:
        """Row indices ordered from the player's edge outward."""
        if player == 0:
            return range(self.height - 1, -1, -1)
        return range(self.height)

    def find_first_barrier(self, col: int, player: int) -> int | None:
        """
        Row of the barrier nearest the player's edge in a column.

        Scans from the player's edge row away from the player and
        returns the first barrier found, or None.
        """
        for row in self.rows_from_edge(player):
            if self.is_barrier_at(row, col):
                return row
        return None

    def swap(self, a: BoardCoord, b: BoardCoord) -> Board:
        """Return new board with two cells exchanged."""
        card_a = self.at(a.row, a.col)
        card_b = self.at(b.row, b.col)
        return self.with_cell(a.row, a.col, card_b).with_cell(b.row, b.col, card_a)

    def barrier_positions(self) -> set[tuple[int, int]]:
        return {(r, c) for r, c, card in self.cells() if card is not None and card.is_barrier}


@dataclass(frozen=True)
class PlayerSpace(Grid):
    """One player's private 2x3 space."""

    def fill_order(self, player: int) -> range:
        """
        Row order in which a column is filled.

        Player 0 fills its last row first and works upward; player 1
        fills its first row first and works downward.
        """
        if player == 0:
            return range(self.height - 1, -1, -1)
        return range(self.height)

    def find_empty_slot(self, player: int, col: int) -> int | None:
        """First empty row in a column following fill order, None if full."""
        for row in self.fill_order(player):
            if self.is_empty(row, col):
                return row
        return None

    def is_column_full(self, player: int, col: int) -> bool:
        return self.find_empty_slot(player, col) is None

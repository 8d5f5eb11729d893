"""
Column Mechanics - Gravity shift and spawn placement.

After a player pulls a card off the board, the column it came from
slides toward that player to close the gap, and a fresh card enters
on the far side so it has to travel back on later turns.

Barriers are walls. The wall for a shift is the barrier nearest the
pulling player's edge; nothing moves past it and everything beyond it
is left alone.
"""

from __future__ import annotations

from .board import Board, Cell


def compaction_zone(board: Board, col: int, player: int) -> list[int]:
    """
    Rows that take part in a shift, ordered from the player's edge.

    The zone stops just before the wall (or runs the full column when
    there is no barrier).
    """
    zone = []
    for row in board.rows_from_edge(player):
        if board.is_barrier_at(row, col):
            break
        zone.append(row)
    return zone


def shift_column(board: Board, col: int, player: int) -> Board:
    """
    Pull the cards in a column toward the player, closing any gaps.

    Cards keep their relative order. Rows beyond the wall are untouched.
    """
    zone = compaction_zone(board, col, player)
    cards = [board.at(row, col) for row in zone if board.at(row, col) is not None]

    column: list[Cell] = list(board.column(col))
    for i, row in enumerate(zone):
        column[row] = cards[i] if i < len(cards) else None
    return board.with_column(col, tuple(column))


def find_spawn_row(board: Board, col: int, player: int) -> int:
    """
    Row where the replacement card enters after a shift.

    No barrier: the far edge of the column (row 0 when player 0 pulled,
    the last row when player 1 pulled). With a wall: the cell next to
    it on the player's side, which is where the shift leaves its gap;
    if that cell is off the grid, the cell on the other side.
    """
    wall = board.find_first_barrier(col, player)
    if wall is None:
        return 0 if player == 0 else board.height - 1

    step = 1 if player == 0 else -1
    row = wall + step
    if not 0 <= row < board.height:
        row = wall - step
    return row

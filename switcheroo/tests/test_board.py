"""
Tests for the board, player spaces and column mechanics.
"""

import pytest

from ..engine_core.board import Board, BoardCoord, PlayerSpace
from ..engine_core.columns import compaction_zone, find_spawn_row, shift_column
from .conftest import A1, A2, S1, SP, I1, BO, BR


def board_with_column(cells, col=1, filler=BO) -> Board:
    """4x3 board whose column `col` holds `cells` (top to bottom)."""
    rows = []
    for r, cell in enumerate(cells):
        row = [filler, filler, filler]
        row[col] = cell
        rows.append(tuple(row))
    return Board(rows=tuple(rows))


class TestBoardQueries:
    """Tests for board helpers."""

    def test_edge_rows(self):
        board = Board.empty(4, 3)
        assert board.edge_row(0) == 3
        assert board.edge_row(1) == 0

    def test_out_of_bounds_is_answered(self):
        board = Board.empty(4, 3)
        assert not board.in_bounds(4, 0)
        assert not board.in_bounds(0, -1)
        assert board.at(9, 9) is None
        assert not board.is_barrier_at(-1, 0)

    def test_find_first_barrier_depends_on_player(self):
        """The wall is the barrier nearest the pulling player's edge."""
        board = board_with_column([A1, BR, BR, S1])
        assert board.find_first_barrier(1, player=0) == 2
        assert board.find_first_barrier(1, player=1) == 1

    def test_find_first_barrier_none(self):
        board = board_with_column([A1, S1, SP, I1])
        assert board.find_first_barrier(1, player=0) is None

    def test_swap(self):
        board = board_with_column([A1, S1, SP, I1])
        swapped = board.swap(BoardCoord(0, 1), BoardCoord(3, 0))

        assert swapped.at(0, 1) == BO
        assert swapped.at(3, 0) == A1
        assert board.at(0, 1) == A1

    def test_barrier_positions(self):
        board = board_with_column([A1, BR, S1, BR])
        assert board.barrier_positions() == {(1, 1), (3, 1)}

    def test_with_column_checks_length(self):
        with pytest.raises(ValueError):
            Board.empty(4, 3).with_column(0, (None, None))


class TestPlayerSpace:
    """Tests for player-space slot finding."""

    def test_player_zero_fills_last_row_first(self):
        space = PlayerSpace.empty(2, 3)
        assert space.find_empty_slot(0, 1) == 1

        space = space.with_cell(1, 1, A1)
        assert space.find_empty_slot(0, 1) == 0

    def test_player_one_fills_first_row_first(self):
        space = PlayerSpace.empty(2, 3)
        assert space.find_empty_slot(1, 2) == 0

        space = space.with_cell(0, 2, A1)
        assert space.find_empty_slot(1, 2) == 1

    def test_full_column(self):
        space = PlayerSpace.empty(2, 3).with_cell(0, 0, A1).with_cell(1, 0, S1)
        assert space.find_empty_slot(0, 0) is None
        assert space.is_column_full(1, 0)
        assert not space.is_column_full(0, 1)


class TestShiftColumn:
    """Tests for gravity shift toward the pulling player."""

    def test_player_zero_pulls_down(self):
        board = board_with_column([S1, SP, I1, None])
        shifted = shift_column(board, 1, player=0)
        assert shifted.column(1) == (None, S1, SP, I1)

    def test_player_one_pulls_up(self):
        board = board_with_column([None, S1, SP, I1])
        shifted = shift_column(board, 1, player=1)
        assert shifted.column(1) == (S1, SP, I1, None)

    def test_gaps_close_preserving_order(self):
        board = board_with_column([A2, None, S1, None])
        shifted = shift_column(board, 1, player=0)
        assert shifted.column(1) == (None, None, A2, S1)

    def test_cells_beyond_wall_untouched(self):
        board = board_with_column([A2, BR, S1, None])
        shifted = shift_column(board, 1, player=0)

        assert shifted.column(1) == (A2, BR, None, S1)
        assert compaction_zone(board, 1, player=0) == [3, 2]

    def test_wall_for_player_one(self):
        board = board_with_column([None, S1, BR, A1])
        shifted = shift_column(board, 1, player=1)
        assert shifted.column(1) == (S1, None, BR, A1)

    def test_other_columns_untouched(self):
        board = board_with_column([S1, SP, I1, None])
        shifted = shift_column(board, 1, player=0)
        assert shifted.column(0) == board.column(0)
        assert shifted.column(2) == board.column(2)


class TestSpawnRow:
    """Tests for spawn placement after a shift."""

    def test_no_barrier_spawns_at_far_edge(self):
        board = board_with_column([None, S1, SP, I1])
        assert find_spawn_row(board, 1, player=0) == 0
        assert find_spawn_row(board, 1, player=1) == 3

    def test_spawn_fills_gap_next_to_wall(self):
        board = shift_column(board_with_column([A2, BR, S1, None]), 1, player=0)
        row = find_spawn_row(board, 1, player=0)
        assert row == 2
        assert board.at(row, 1) is None

    def test_spawn_for_player_one_next_to_wall(self):
        board = shift_column(board_with_column([None, S1, BR, A1]), 1, player=1)
        row = find_spawn_row(board, 1, player=1)
        assert row == 1
        assert board.at(row, 1) is None

    def test_wall_on_edge_falls_back_to_other_side(self):
        board = board_with_column([A1, S1, A2, BR])
        assert find_spawn_row(board, 1, player=0) == 2

    def test_nearest_of_two_barriers_is_the_wall(self):
        board = board_with_column([A1, BR, BR, None])
        assert find_spawn_row(board, 1, player=0) == 3

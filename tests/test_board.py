"""Tests for Connect4Board."""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from connect4_engine.games.connect4 import (
    Connect4Board,
    InvalidBoardError,
    InvalidMoveError,
)


def test_board_initialization():
    """Empty board has every column legal."""
    board = Connect4Board()
    assert board.shape == (6, 7)
    assert np.all(board.grid == 0)
    assert board.legal_columns() == list(range(7))
    assert not board.is_full()


def test_drop_stacks_bottom_up():
    """Pieces land on the lowest empty cell of a column."""
    board = Connect4Board()
    assert board.drop(3, 1) == 5
    assert board.drop(3, 2) == 4
    assert board.drop(3, 1) == 3
    assert board.cell(5, 3) == 1
    assert board.cell(4, 3) == 2
    assert board.height(3) == 3


def test_count_follows_drop_and_undo():
    board = Connect4Board()
    assert board.count(1) == board.count(2) == 0
    board.drop(3, 1)
    board.drop(3, 2)
    row = board.drop(0, 1)
    assert board.count(1) == 2
    assert board.count(2) == 1
    board.undo(row, 0)
    assert board.count(1) == 1
    assert board.count(2) == 1


def test_drop_into_full_column_raises():
    """Dropping into a full column is an invalid-state error."""
    board = Connect4Board()
    for i in range(6):
        board.drop(0, 1 + i % 2)
    assert not board.is_legal(0)
    with pytest.raises(InvalidMoveError):
        board.drop(0, 1)


@pytest.mark.parametrize("column", [-1, 7, 100])
def test_drop_out_of_range_raises(column):
    board = Connect4Board()
    assert not board.is_legal(column)
    with pytest.raises(InvalidMoveError):
        board.drop(column, 1)


def test_drop_rejects_unknown_player():
    board = Connect4Board()
    with pytest.raises(InvalidMoveError):
        board.drop(0, 3)


def test_undo_restores_board():
    """Undo of the top piece returns the board to the previous state."""
    board = Connect4Board()
    board.drop(2, 1)
    before = board.copy()
    row = board.drop(2, 2)
    board.undo(row, 2)
    assert board == before
    assert board.height(2) == 1
    assert board.drop(2, 2) == row


def test_undo_rejects_cell_below_top():
    """Only the top piece of a column can be removed."""
    board = Connect4Board()
    low = board.drop(4, 1)
    board.drop(4, 2)
    with pytest.raises(InvalidMoveError):
        board.undo(low, 4)
    with pytest.raises(InvalidMoveError):
        board.undo(5, 5)


def test_grid_is_read_only():
    """Cells can only be written through drop."""
    board = Connect4Board()
    with pytest.raises(ValueError):
        board.grid[5, 0] = 1


def test_copy_is_independent():
    board = Connect4Board()
    board.drop(1, 1)
    clone = board.copy()
    clone.drop(1, 2)
    assert board.height(1) == 1
    assert clone.height(1) == 2
    assert board != clone


def test_from_matrix_round_trip():
    """A snapshot comes back unchanged and column heights are recovered."""
    matrix = [[0] * 7 for _ in range(6)]
    matrix[5][3] = 1
    matrix[4][3] = 2
    matrix[5][0] = 2

    board = Connect4Board.from_matrix(matrix)
    assert board.to_matrix() == matrix
    assert board.height(3) == 2
    assert board.height(0) == 1
    assert board.drop(3, 1) == 3


def test_from_matrix_does_not_alias_input():
    matrix = np.zeros((6, 7), dtype=np.int8)
    board = Connect4Board.from_matrix(matrix)
    board.drop(0, 1)
    assert matrix[5, 0] == 0


def test_from_matrix_rejects_floating_piece():
    matrix = [[0] * 7 for _ in range(6)]
    matrix[3][2] = 1
    with pytest.raises(InvalidBoardError):
        Connect4Board.from_matrix(matrix)


def test_from_matrix_rejects_unknown_values():
    matrix = [[0] * 7 for _ in range(6)]
    matrix[5][0] = 7
    with pytest.raises(InvalidBoardError):
        Connect4Board.from_matrix(matrix)


def test_from_matrix_rejects_bad_shape():
    with pytest.raises(InvalidBoardError):
        Connect4Board.from_matrix([1, 2, 0])
    with pytest.raises(InvalidBoardError):
        Connect4Board.from_matrix([[0, 0], [0]])


def test_full_board_has_no_legal_columns():
    board = Connect4Board(rows=2, cols=2)
    for col in range(2):
        board.drop(col, 1)
        board.drop(col, 2)
    assert board.is_full()
    assert board.legal_columns() == []


def test_render():
    """Render shows column numbers, X/O pieces and a bottom border."""
    board = Connect4Board()
    board.drop(0, 1)
    board.drop(6, 2)
    lines = board.render().splitlines()
    assert lines[0] == "  0 1 2 3 4 5 6"
    assert lines[1] == "| . . . . . . . |"
    assert lines[6] == "| X . . . . . O |"
    assert lines[7] == "+-" + "--" * 7 + "+"

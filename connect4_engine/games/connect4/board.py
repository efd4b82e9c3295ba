"""Mutable Connect4 board used by the search (drop / undo in place)."""

from __future__ import annotations

from typing import List, Sequence, Union

import numpy as np

from .utils import (
    CONNECT4_COLS,
    CONNECT4_ROWS,
    CONNECT_LENGTH,
    EMPTY,
    PLAYER_ONE,
    PLAYER_TWO,
    check_n_in_row,
    validate_player,
)

MatrixLike = Union[np.ndarray, Sequence[Sequence[int]]]

_PIECE_CHARS = {EMPTY: ".", PLAYER_ONE: "X", PLAYER_TWO: "O"}


class InvalidMoveError(ValueError):
    """Drop into a full / missing column, or undo of a cell that is not on top."""


class InvalidBoardError(ValueError):
    """Board snapshot with a bad shape, unknown cell values or floating pieces."""


class Connect4Board:
    """
    Fixed-size gravity board. Row 0 is the top.

    Pieces only enter through :meth:`drop` and only leave through :meth:`undo`,
    so every column is always filled bottom-up. Column heights are tracked
    alongside the grid to keep ``drop`` and ``is_legal`` O(1).
    """

    def __init__(self, rows: int = CONNECT4_ROWS, cols: int = CONNECT4_COLS) -> None:
        if rows < 1 or cols < 1:
            raise ValueError(f"Board must be at least 1x1, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self._grid = np.zeros((rows, cols), dtype=np.int8)
        self._heights: List[int] = [0] * cols

    @classmethod
    def from_matrix(cls, matrix: MatrixLike) -> "Connect4Board":
        """Build a board from a snapshot (nested lists or 2D array, row 0 = top)."""
        try:
            arr = np.asarray(matrix, dtype=np.int64)
        except (TypeError, ValueError) as exc:
            raise InvalidBoardError(f"Board snapshot is not a rectangular grid: {exc}") from exc
        if arr.ndim != 2 or arr.shape[0] < 1 or arr.shape[1] < 1:
            raise InvalidBoardError(f"Board snapshot must be 2D, got shape {arr.shape}")

        unknown = set(np.unique(arr).tolist()) - {EMPTY, PLAYER_ONE, PLAYER_TWO}
        if unknown:
            raise InvalidBoardError(f"Unknown cell values in snapshot: {sorted(unknown)}")

        rows, cols = arr.shape
        board = cls(rows=rows, cols=cols)
        for col in range(cols):
            height = int(np.count_nonzero(arr[:, col]))
            if height and np.any(arr[rows - height:, col] == EMPTY):
                raise InvalidBoardError(f"Column {col} has a floating piece")
            board._heights[col] = height
        board._grid[:, :] = arr
        return board

    @property
    def shape(self) -> tuple:
        return (self.rows, self.cols)

    @property
    def grid(self) -> np.ndarray:
        """Read-only view of the cells."""
        view = self._grid.view()
        view.flags.writeable = False
        return view

    def height(self, column: int) -> int:
        """Number of pieces stacked in ``column``."""
        return self._heights[column]

    def is_legal(self, column: int) -> bool:
        return 0 <= column < self.cols and self._heights[column] < self.rows

    def legal_columns(self) -> List[int]:
        return [col for col in range(self.cols) if self._heights[col] < self.rows]

    def is_full(self) -> bool:
        return all(h == self.rows for h in self._heights)

    def drop(self, column: int, player: int) -> int:
        """
        Place ``player``'s piece on top of ``column``.

        Returns:
            Row index where the piece landed.

        Raises:
            InvalidMoveError: If the column is out of range or already full.
        """
        try:
            validate_player(player)
        except ValueError as exc:
            raise InvalidMoveError(str(exc)) from exc
        if not 0 <= column < self.cols:
            raise InvalidMoveError(f"Column {column} is out of range [0, {self.cols})")
        height = self._heights[column]
        if height >= self.rows:
            raise InvalidMoveError(f"Column {column} is full")
        row = self.rows - 1 - height
        self._grid[row, column] = player
        self._heights[column] = height + 1
        return row

    def undo(self, row: int, column: int) -> None:
        """Remove the piece at (row, column), which must be the top of its column."""
        if not 0 <= column < self.cols:
            raise InvalidMoveError(f"Column {column} is out of range [0, {self.cols})")
        height = self._heights[column]
        if height == 0 or row != self.rows - height:
            raise InvalidMoveError(
                f"Cell ({row}, {column}) is not the top piece of column {column}"
            )
        self._grid[row, column] = EMPTY
        self._heights[column] = height - 1

    def cell(self, row: int, column: int) -> int:
        return int(self._grid[row, column])

    def count(self, player: int) -> int:
        return int(np.count_nonzero(self._grid == player))

    def copy(self) -> "Connect4Board":
        other = Connect4Board(rows=self.rows, cols=self.cols)
        other._grid[:, :] = self._grid
        other._heights = list(self._heights)
        return other

    def to_matrix(self) -> List[List[int]]:
        return self._grid.tolist()

    def render(self) -> str:
        """Text grid: column numbers, one line per row, bottom border."""
        lines = ["  " + " ".join(str(col) for col in range(self.cols))]
        for row in range(self.rows):
            pieces = " ".join(_PIECE_CHARS.get(int(v), "?") for v in self._grid[row])
            lines.append(f"| {pieces} |")
        lines.append("+-" + "--" * self.cols + "+")
        return "\n".join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Connect4Board):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._grid, other._grid))

    def __repr__(self) -> str:
        return f"Connect4Board(rows={self.rows}, cols={self.cols}, pieces={sum(self._heights)})"

    def __str__(self) -> str:
        return self.render()


def is_winning_move(board: Connect4Board, row: int, column: int, player: int) -> bool:
    """True if the piece just dropped at (row, column) completes a run of four."""
    return check_n_in_row(board.grid, row, column, player, n=CONNECT_LENGTH)

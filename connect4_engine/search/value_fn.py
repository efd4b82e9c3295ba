"""Static window-count evaluation for Connect4 positions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

import numpy as np

from connect4_engine.games.connect4 import CONNECT_LENGTH, Connect4Board, opponent


@dataclass(frozen=True)
class WindowWeights:
    """Reward for a window owned by one player, keyed by its piece count."""

    win_score: int = 100_000
    three_score: int = 100

    def __post_init__(self) -> None:
        if self.win_score < 0 or self.three_score < 0:
            raise ValueError("Window weights must be non-negative")

    def reward_table(self, length: int = CONNECT_LENGTH) -> np.ndarray:
        """``table[k]`` is the reward for ``k`` pieces in an otherwise empty window."""
        table = np.zeros(length + 1, dtype=np.int64)
        table[length] = self.win_score
        if length > 1:
            table[length - 1] = self.three_score
        return table


@lru_cache(maxsize=None)
def window_indices(rows: int, cols: int, length: int = CONNECT_LENGTH) -> np.ndarray:
    """
    Flat cell indices of every ``length``-cell window on a ``rows x cols`` board.

    Returns an ``(n_windows, length)`` int array, ordered horizontal, vertical,
    diagonal ``\\``, diagonal ``/``. A 6x7 board has 24 + 21 + 12 + 12 = 69 windows.
    """
    windows = []
    for dr, dc in ((0, 1), (1, 0), (1, 1), (1, -1)):
        for r in range(rows):
            for c in range(cols):
                r_end = r + dr * (length - 1)
                c_end = c + dc * (length - 1)
                if not (0 <= r_end < rows and 0 <= c_end < cols):
                    continue
                windows.append([(r + dr * k) * cols + (c + dc * k) for k in range(length)])

    indices = np.array(windows, dtype=np.intp).reshape(-1, length)
    indices.flags.writeable = False
    return indices


def evaluate_board(
    board: Connect4Board,
    player: int,
    weights: Optional[WindowWeights] = None,
) -> int:
    """
    Heuristic score of ``board`` for ``player``, independent of who moves next.

    Windows holding only ``player``'s pieces add the reward for their count,
    windows holding only the opponent's pieces subtract it, mixed windows
    count for nothing.
    """
    weights = weights or WindowWeights()
    opp = opponent(player)

    cells = board.grid.ravel()[window_indices(board.rows, board.cols, CONNECT_LENGTH)]
    mine = np.count_nonzero(cells == player, axis=1)
    theirs = np.count_nonzero(cells == opp, axis=1)

    table = weights.reward_table(CONNECT_LENGTH)
    gained = table[mine[theirs == 0]].sum()
    lost = table[theirs[mine == 0]].sum()
    return int(gained - lost)


class BoardValueFn(ABC):
    """Evaluator returning a score for a fixed perspective player."""

    @abstractmethod
    def evaluate(self, board: Connect4Board, player: int) -> int:
        """Higher is better for ``player``."""
        ...


class Connect4WindowValueFn(BoardValueFn):
    """Window-count evaluator (four in a row and open threes)."""

    def __init__(self, weights: Optional[WindowWeights] = None) -> None:
        self.weights = weights or WindowWeights()

    def evaluate(self, board: Connect4Board, player: int) -> int:
        return evaluate_board(board, player, self.weights)

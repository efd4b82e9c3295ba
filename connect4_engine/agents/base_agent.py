"""Base agent interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from connect4_engine.games.connect4.board import MatrixLike


class BaseAgent(ABC):
    """Base class for all Connect4 agents."""

    @abstractmethod
    def play(self, board: MatrixLike, player: int) -> int:
        """
        Choose a column for ``player``.

        Args:
            board: Snapshot of the cells, row 0 at the top; 0 = empty,
                1 / 2 = that player's piece.
            player: The acting player (1 or 2).

        Returns:
            Column index to drop into.
        """

    @property
    def name(self) -> str:
        """Display name used in match results."""
        return type(self).__name__

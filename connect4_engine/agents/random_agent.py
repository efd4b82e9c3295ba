"""Random agent implementation."""

from typing import Optional

import numpy as np

from connect4_engine.games.connect4 import Connect4Board
from connect4_engine.games.connect4.board import MatrixLike
from .base_agent import BaseAgent


class RandomAgent(BaseAgent):
    """Agent that drops into a uniformly random legal column."""

    def __init__(self, seed: Optional[int] = None, rng: Optional[np.random.Generator] = None):
        """
        Initialize random agent.

        Args:
            seed: Random seed for reproducibility
            rng: Generator to draw from; overrides ``seed``
        """
        self.rng = rng or np.random.default_rng(seed)

    @property
    def name(self) -> str:
        return "RandomBot"

    def play(self, board: MatrixLike, player: int) -> int:
        legal = Connect4Board.from_matrix(board).legal_columns()
        if not legal:
            raise ValueError("No legal actions available")
        return int(self.rng.choice(legal))

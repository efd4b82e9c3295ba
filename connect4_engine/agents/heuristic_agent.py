"""Heuristic agent implementation."""

from typing import Optional

import numpy as np

from connect4_engine.games.connect4 import Connect4Board, opponent, validate_player
from connect4_engine.games.connect4.board import MatrixLike
from connect4_engine.search import find_winning_column
from .base_agent import BaseAgent


class HeuristicAgent(BaseAgent):
    """
    Heuristic agent that uses simple rules:
    1. Win if possible
    2. Block opponent from winning
    3. Otherwise random
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[np.random.Generator] = None):
        self.rng = rng or np.random.default_rng(seed)

    @property
    def name(self) -> str:
        return "HeuristicBot"

    def play(self, board: MatrixLike, player: int) -> int:
        player = validate_player(player)
        state = Connect4Board.from_matrix(board)
        legal = state.legal_columns()
        if not legal:
            raise ValueError("No legal actions available")

        # Try to win, then try to block
        for who in (player, opponent(player)):
            column = find_winning_column(state, who, legal)
            if column is not None:
                return column

        return int(self.rng.choice(legal))

"""Rule-based agent that avoids setting up the opponent's win."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from connect4_engine.games.connect4 import (
    Connect4Board,
    is_winning_move,
    opponent,
    validate_player,
)
from connect4_engine.games.connect4.board import MatrixLike
from connect4_engine.search import center_out_order, find_winning_column, validate_column_order
from .base_agent import BaseAgent


def gives_opponent_win(board: Connect4Board, column: int, player: int) -> bool:
    """
    True if ``player`` dropping into ``column`` lets the opponent win by
    playing on top of that piece.

    The board is restored before returning.
    """
    if not board.is_legal(column):
        return False
    other = opponent(player)
    row = board.drop(column, player)
    try:
        if not board.is_legal(column):
            return False
        above = board.drop(column, other)
        try:
            return is_winning_move(board, above, column, other)
        finally:
            board.undo(above, column)
    finally:
        board.undo(row, column)


class StrategicAgent(BaseAgent):
    """
    Strategic agent that uses simple rules:
    1. Win if possible
    2. Block opponent from winning
    3. Otherwise the most central column that does not hand the opponent
       a win on top of it
    4. If every column does, the leftmost legal column
    """

    def __init__(self, column_order: Optional[Sequence[int]] = None):
        self.column_order: Optional[Tuple[int, ...]] = (
            None if column_order is None else tuple(column_order)
        )

    @property
    def name(self) -> str:
        return "StrategicBot"

    def play(self, board: MatrixLike, player: int) -> int:
        player = validate_player(player)
        state = Connect4Board.from_matrix(board)
        legal = state.legal_columns()
        if not legal:
            raise ValueError("No legal actions available")

        for who in (player, opponent(player)):
            column = find_winning_column(state, who, legal)
            if column is not None:
                return column

        if self.column_order is None:
            order = center_out_order(state.cols)
        else:
            order = validate_column_order(self.column_order, state.cols)
        for col in order:
            if state.is_legal(col) and not gives_opponent_win(state, col, player):
                return col

        return legal[0]

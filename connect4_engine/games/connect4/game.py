"""Connect4 game rules (immutable state, for the match runner)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .board import Connect4Board, is_winning_move
from .utils import CONNECT4_COLS, CONNECT4_ROWS, PLAYER_ONE, opponent


@dataclass(frozen=True)
class Connect4State:
    board: Connect4Board
    current_player: int
    winner: Optional[int]
    done: bool
    move_count: int = 0
    last_move: Optional[Tuple[int, int]] = None


class Connect4Game:
    """
    Pure Connect4 rules: transitions between states, no agents and no I/O.

    Every transition copies the board, so states handed out are never
    mutated afterwards.
    """

    def __init__(self, rows: int = CONNECT4_ROWS, cols: int = CONNECT4_COLS) -> None:
        self.rows = rows
        self.cols = cols

    def initial_state(self) -> Connect4State:
        return Connect4State(
            board=Connect4Board(rows=self.rows, cols=self.cols),
            current_player=PLAYER_ONE,
            winner=None,
            done=False,
        )

    def legal_actions(self, state: Connect4State) -> List[int]:
        if state.done:
            return []
        return state.board.legal_columns()

    def is_legal(self, state: Connect4State, action: int) -> bool:
        return not state.done and state.board.is_legal(action)

    def apply_action(self, state: Connect4State, action: int) -> Connect4State:
        if state.done:
            raise ValueError("Cannot apply action in terminal state")

        board = state.board.copy()
        player = state.current_player
        row = board.drop(action, player)

        winner: Optional[int] = None
        done = False

        if is_winning_move(board, row, action, player):
            winner = player
            done = True
        elif board.is_full():
            winner = 0
            done = True

        return Connect4State(
            board=board,
            current_player=opponent(player),
            winner=winner,
            done=done,
            move_count=state.move_count + 1,
            last_move=(row, action),
        )

    def is_terminal(self, state: Connect4State) -> bool:
        return state.done

    def winner(self, state: Connect4State) -> Optional[int]:
        """
        Who won:

        * 1 / 2: that player completed four in a row
        * 0: draw (board full)
        * None: game not finished
        """
        return state.winner

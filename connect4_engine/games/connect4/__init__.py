"""Connect4 board, rules and win detection."""

from .board import (
    Connect4Board,
    InvalidBoardError,
    InvalidMoveError,
    is_winning_move,
)
from .game import Connect4Game, Connect4State
from .utils import (
    CONNECT4_COLS,
    CONNECT4_ROWS,
    CONNECT_LENGTH,
    EMPTY,
    PLAYER_ONE,
    PLAYER_TWO,
    check_n_in_row,
    opponent,
    validate_player,
)

__all__ = [
    "CONNECT4_COLS",
    "CONNECT4_ROWS",
    "CONNECT_LENGTH",
    "EMPTY",
    "PLAYER_ONE",
    "PLAYER_TWO",
    "Connect4Board",
    "Connect4Game",
    "Connect4State",
    "InvalidBoardError",
    "InvalidMoveError",
    "check_n_in_row",
    "is_winning_move",
    "opponent",
    "validate_player",
]

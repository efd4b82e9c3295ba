"""Shared rules constants and win detection for Connect4."""

from __future__ import annotations

import numpy as np

# Default board dimensions
CONNECT4_ROWS = 6
CONNECT4_COLS = 7
CONNECT_LENGTH = 4

EMPTY = 0
PLAYER_ONE = 1
PLAYER_TWO = 2
PLAYERS = (PLAYER_ONE, PLAYER_TWO)

# (d_row, d_col): horizontal, vertical, diagonal \, diagonal /
DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))


def validate_player(player: int) -> int:
    """Return ``player`` as a plain int, raising ValueError if it is not 1 or 2."""
    if player not in PLAYERS:
        raise ValueError(f"Player must be one of {PLAYERS}, got {player!r}")
    return int(player)


def opponent(player: int) -> int:
    """The other player's token (1 <-> 2)."""
    return 3 - validate_player(player)


def check_n_in_row(
    board: np.ndarray,
    row: int,
    col: int,
    player: int,
    n: int = CONNECT_LENGTH,
) -> bool:
    """
    Check if there are at least n pieces in a row for the given player
    passing through (row, col).

    Args:
        board: Game board array.
        row: Row position to check from.
        col: Column position to check from.
        player: Player token (1 or 2).
        n: Number of pieces in a row to check for.

    Returns:
        True if player has at least n in a row through (row, col).
    """
    rows, cols = board.shape

    for dr, dc in DIRECTIONS:
        count = 1
        # Check positive direction
        for i in range(1, n):
            r, c = row + dr * i, col + dc * i
            if 0 <= r < rows and 0 <= c < cols and board[r, c] == player:
                count += 1
            else:
                break
        # Check negative direction
        for i in range(1, n):
            r, c = row - dr * i, col - dc * i
            if 0 <= r < rows and 0 <= c < cols and board[r, c] == player:
                count += 1
            else:
                break

        if count >= n:
            return True

    return False

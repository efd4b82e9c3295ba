"""CLI that prints the engine's move for a given position."""

from __future__ import annotations

import sys
from typing import List

import tyro

from connect4_engine.games.connect4 import PLAYER_ONE, PLAYER_TWO, Connect4Board, InvalidBoardError
from connect4_engine.search import AlphaBetaSearch, SearchConfig

_CELL_VALUES = {".": 0, "0": 0, "X": 1, "x": 1, "1": 1, "O": 2, "o": 2, "2": 2}


def parse_board(text: str) -> List[List[int]]:
    """
    Parse ``/``-separated rows, top row first, e.g. ``"......./.../...X..."``.

    Cells are ``.``/``0`` (empty), ``X``/``1`` and ``O``/``2``.
    """
    rows = [row.strip() for row in text.strip().split("/")]
    matrix = []
    for row in rows:
        try:
            matrix.append([_CELL_VALUES[ch] for ch in row])
        except KeyError as exc:
            raise InvalidBoardError(f"Unknown cell character {exc.args[0]!r} in row {row!r}") from exc
    if len({len(row) for row in matrix}) != 1:
        raise InvalidBoardError("All rows must have the same length")
    return matrix


def suggest_move(
    board: str,
    player: int = 1,
    depth: int = 7,
    no_pruning: bool = False,
) -> int:
    """
    Print the column chosen for ``player`` on ``board``.

    Args:
        board: Rows separated by '/', top row first; cells '.', 'X' (player 1), 'O' (player 2)
        player: Player to move (1 or 2)
        depth: Search depth in plies
        no_pruning: Search full width (slow; for comparison only)
    """
    try:
        state = Connect4Board.from_matrix(parse_board(board))
        config = SearchConfig.for_columns(state.cols, depth=depth, use_alpha_beta=not no_pruning)
        result = AlphaBetaSearch(config).search(state, player)
    except ValueError as exc:
        # Bad board text, depth < 1 or a player other than 1 / 2
        print(f"Error: {exc}")
        sys.exit(1)

    print(state.render())
    print()
    print(f"Pieces: X={state.count(PLAYER_ONE)} O={state.count(PLAYER_TWO)}")
    print(f"Column: {result.column}")
    print(f"Reason: {result.reason}")
    if result.score is not None:
        print(f"Score:  {result.score}")
    print("Nodes:  {nodes} (leaves {leaves}, cutoffs {cutoffs})".format(**result.stats.as_dict()))
    return result.column


def main() -> None:
    tyro.cli(suggest_move)


if __name__ == "__main__":
    main()

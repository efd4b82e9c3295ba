"""Tests for agents."""

import copy
import sys
from pathlib import Path

import numpy as np
import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from connect4_engine.agents import (
    AlphaBetaAgent,
    HeuristicAgent,
    RandomAgent,
    StrategicAgent,
    gives_opponent_win,
)
from connect4_engine.games.connect4 import Connect4Board
from connect4_engine.search import SearchConfig


def _matrix(pieces):
    matrix = [[0] * 7 for _ in range(6)]
    for row, col, player in pieces:
        matrix[row][col] = player
    return matrix


# Full board with no four in a row for either player.
_FULL_DRAW = [[1 + ([0, 0, 1, 1, 0, 0, 1][c] ^ (r % 2)) for c in range(7)] for r in range(6)]


def test_random_agent():
    """Random agent only picks legal columns."""
    agent = RandomAgent(seed=42)
    matrix = _matrix([(r, 0, 1 + r % 2) for r in range(6)])

    for _ in range(20):
        action = agent.play(matrix, 1)
        assert action in range(1, 7)
    assert agent.name == "RandomBot"


def test_random_agent_is_reproducible():
    empty = _matrix([])
    first = [RandomAgent(seed=7).play(empty, 1) for _ in range(5)]
    second = [RandomAgent(seed=7).play(empty, 1) for _ in range(5)]
    assert first == second


def test_random_agent_full_board_raises():
    full = [[1 + ((r + c // 2) % 2) for c in range(7)] for r in range(6)]
    with pytest.raises(ValueError):
        RandomAgent(seed=0).play(full, 1)


def test_heuristic_agent_wins_then_blocks():
    """Heuristic agent takes its own win before blocking."""
    agent = HeuristicAgent(seed=42)
    block_only = _matrix([(5, 6, 2), (4, 6, 2), (3, 6, 2), (5, 0, 1), (4, 0, 1), (5, 2, 1)])
    assert agent.play(block_only, 1) == 6

    both = _matrix([(5, 0, 1), (4, 0, 1), (3, 0, 1), (5, 6, 2), (4, 6, 2), (3, 6, 2)])
    assert agent.play(both, 1) == 0
    assert agent.play(both, 2) == 6


def test_alphabeta_agent_does_not_mutate_snapshot():
    """The caller's board stays untouched."""
    matrix = _matrix([(5, 3, 1), (5, 2, 2)])
    snapshot = copy.deepcopy(matrix)
    agent = AlphaBetaAgent(depth=3)

    column = agent.play(matrix, 1)
    assert 0 <= column < 7
    assert matrix == snapshot


def test_alphabeta_agent_accepts_numpy_snapshot():
    board = np.zeros((6, 7), dtype=np.int8)
    board[5, 3] = 1
    agent = AlphaBetaAgent(depth=2)
    column = agent.play(board, 2)
    assert 0 <= column < 7
    assert board.sum() == 1


def test_alphabeta_agent_reports_last_result():
    agent = AlphaBetaAgent(depth=3)
    matrix = _matrix([(5, 0, 1), (4, 0, 1), (3, 0, 1), (5, 6, 2), (4, 6, 2)])
    assert agent.play(matrix, 1) == 0
    assert agent.last_result is not None
    assert agent.last_result.reason == "win"


def test_alphabeta_agent_defaults():
    agent = AlphaBetaAgent()
    assert agent.name == "AlphaBetaConnect4Bot"
    assert agent.config.depth == 7
    assert agent.config.use_alpha_beta


def test_alphabeta_agent_rejects_conflicting_depth():
    with pytest.raises(ValueError):
        AlphaBetaAgent(depth=3, config=SearchConfig(depth=5))


def test_alphabeta_agent_falls_back_on_full_board():
    """A board with no legal column returns column 0 instead of raising."""
    assert AlphaBetaAgent(depth=2).play(_FULL_DRAW, 1) == 0


# Row 4 holds three O pieces over columns 0-2; an X dropped into column 3
# lands on row 5 and gives O the winning cell (4, 3) on top of it.
_TRAP = [
    (5, 0, 1), (5, 1, 2), (5, 2, 1), (5, 5, 1), (5, 6, 1),
    (4, 0, 2), (4, 1, 2), (4, 2, 2),
]


def test_strategic_agent_prefers_center():
    agent = StrategicAgent()
    assert agent.name == "StrategicBot"
    assert agent.play(_matrix([]), 1) == 3


def test_strategic_agent_wins_then_blocks():
    agent = StrategicAgent()
    block_only = _matrix([(5, 6, 2), (4, 6, 2), (3, 6, 2), (5, 0, 1), (4, 0, 1), (5, 2, 1)])
    assert agent.play(block_only, 1) == 6

    both = _matrix([(5, 0, 1), (4, 0, 1), (3, 0, 1), (5, 6, 2), (4, 6, 2), (3, 6, 2)])
    assert agent.play(both, 1) == 0
    assert agent.play(both, 2) == 6


def test_gives_opponent_win_restores_board():
    board = Connect4Board.from_matrix(_matrix(_TRAP))
    before = board.copy()

    assert gives_opponent_win(board, 3, 1)
    assert not gives_opponent_win(board, 2, 1)
    # O in column 3 only hands X the cell (4, 3), which completes nothing
    assert not gives_opponent_win(board, 3, 2)
    assert board == before


def test_gives_opponent_win_top_cell_is_safe():
    """Filling the last cell of a column leaves nothing to play on top."""
    matrix = _matrix([(r, 3, 1 + r % 2) for r in range(1, 6)])
    board = Connect4Board.from_matrix(matrix)
    assert not gives_opponent_win(board, 3, 1)
    assert not gives_opponent_win(Connect4Board.from_matrix(_FULL_DRAW), 3, 1)


def test_strategic_agent_never_plays_under_opponent_win():
    """Column 3 is skipped for the next central safe column."""
    agent = StrategicAgent()
    matrix = _matrix(_TRAP)
    snapshot = copy.deepcopy(matrix)

    assert agent.play(matrix, 1) == 2
    assert matrix == snapshot


def test_strategic_agent_custom_order():
    agent = StrategicAgent(column_order=[6, 5, 4, 3, 2, 1, 0])
    assert agent.play(_matrix([]), 1) == 6
    with pytest.raises(ValueError):
        StrategicAgent(column_order=[0, 1, 2]).play(_matrix([]), 1)


def test_strategic_agent_falls_back_when_every_column_is_unsafe():
    """Only column 3 is open and O wins on top of it, so it is played anyway."""
    matrix = copy.deepcopy(_FULL_DRAW)
    matrix[0][3] = 0
    matrix[1][3] = 0
    matrix[0][0] = 2
    matrix[0][1] = 2
    board = Connect4Board.from_matrix(matrix)
    assert board.legal_columns() == [3]
    assert gives_opponent_win(board, 3, 1)

    assert StrategicAgent().play(matrix, 1) == 3


def test_strategic_agent_full_board_raises():
    with pytest.raises(ValueError):
        StrategicAgent().play(_FULL_DRAW, 1)

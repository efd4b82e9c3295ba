"""Utilities for playing matches between agents."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from connect4_engine.agents.base_agent import BaseAgent
from connect4_engine.games.connect4 import (
    PLAYER_ONE,
    PLAYER_TWO,
    Connect4Game,
    opponent,
)


@dataclass
class GameResult:
    winner: int  # 0 = draw, 1 = player 1, 2 = player 2
    total_moves: int
    player1_name: str
    player2_name: str
    moves: List[int] = field(default_factory=list)
    forfeit_reason: Optional[str] = None

    def __str__(self) -> str:
        if self.winner == 0:
            outcome = "Draw"
        elif self.winner == PLAYER_ONE:
            outcome = f"Winner: {self.player1_name} (Player 1)"
        elif self.winner == PLAYER_TWO:
            outcome = f"Winner: {self.player2_name} (Player 2)"
        else:
            outcome = "Unknown result"
        lines = [
            outcome,
            f"Total moves: {self.total_moves}",
            f"Player 1: {self.player1_name}",
            f"Player 2: {self.player2_name}",
        ]
        if self.forfeit_reason:
            lines.append(f"Forfeit: {self.forfeit_reason}")
        return "\n".join(lines)


def _as_column(move: object) -> Optional[int]:
    if isinstance(move, bool) or not isinstance(move, (int, np.integer)):
        return None
    return int(move)


def play_game(
    agent1: BaseAgent,
    agent2: BaseAgent,
    game: Optional[Connect4Game] = None,
    render: bool = False,
) -> GameResult:
    """
    Play one game, ``agent1`` moving first as player 1.

    Each agent gets a copy of the board. An exception from the agent, a
    non-integer move or an illegal column forfeits the game to the other
    player.
    """
    game = game or Connect4Game()
    state = game.initial_state()
    agents = {PLAYER_ONE: agent1, PLAYER_TWO: agent2}
    moves: List[int] = []
    forfeit_reason: Optional[str] = None
    winner: Optional[int] = None

    if render:
        print(f"Player 1: {agent1.name}")
        print(f"Player 2: {agent2.name}")
        print("=" * 41)
        print(state.board.render())

    while not game.is_terminal(state):
        player = state.current_player
        agent = agents[player]
        try:
            move = agent.play(state.board.to_matrix(), player)
        except Exception as exc:
            forfeit_reason = f"{agent.name} raised {type(exc).__name__}: {exc}"
            winner = opponent(player)
            break

        column = _as_column(move)
        if column is None or not game.is_legal(state, column):
            forfeit_reason = f"Invalid move by {agent.name}: column {move!r}"
            winner = opponent(player)
            break

        state = game.apply_action(state, column)
        moves.append(column)
        if render:
            print(f"\nPlayer {player} ({agent.name}) plays column {column}")
            print(state.board.render())

    if winner is None:
        winner = game.winner(state) or 0

    result = GameResult(
        winner=winner,
        total_moves=len(moves),
        player1_name=agent1.name,
        player2_name=agent2.name,
        moves=moves,
        forfeit_reason=forfeit_reason,
    )
    if render:
        print()
        print(result)
    return result


def play_match(
    agent1: BaseAgent,
    agent2: BaseAgent,
    num_games: int = 1,
    alternate_first: bool = True,
    game: Optional[Connect4Game] = None,
    render: bool = False,
) -> Tuple[int, int, int]:
    """
    Play a series of games between two agents.

    Args:
        agent1: First agent
        agent2: Second agent
        num_games: Number of games to play
        alternate_first: If True, agent2 moves first in every odd-numbered game.
                         If False, agent1 always goes first (as player 1).
        game: Rules instance (default: standard 6x7 board)
        render: Print every board

    Returns:
        Tuple of (agent1_wins, draws, agent2_wins).
    """
    if num_games < 1:
        raise ValueError(f"num_games must be >= 1, got {num_games}")

    agent1_wins = 0
    draws = 0
    agent2_wins = 0

    for game_idx in range(num_games):
        agent1_first = not (alternate_first and game_idx % 2 == 1)
        first, second = (agent1, agent2) if agent1_first else (agent2, agent1)
        result = play_game(first, second, game=game, render=render)

        if result.winner == 0:
            draws += 1
        elif (result.winner == PLAYER_ONE) == agent1_first:
            agent1_wins += 1
        else:
            agent2_wins += 1

    return agent1_wins, draws, agent2_wins

"""CLI for playing agent vs agent."""

from typing import Literal, Optional

import tyro

from connect4_engine.agents import BaseAgent
from connect4_engine.config import AgentConfig, AppConfig, MatchConfig, load_config
from connect4_engine.registry import make_agent
from connect4_engine.utils.match import play_match

AgentType = Literal["alphabeta", "heuristic", "random", "strategic"]


def build_agent(agent_cfg: AgentConfig, seed: Optional[int] = None) -> BaseAgent:
    """Instantiate a registered agent, seeding the stochastic ones."""
    params = dict(agent_cfg.params)
    if agent_cfg.id in ("random", "heuristic") and seed is not None:
        params.setdefault("seed", seed)
    return make_agent(agent_cfg.id, **params)


def play_agent_vs_agent(
    agent1_type: AgentType = "alphabeta",
    agent2_type: AgentType = "random",
    depth1: int = 7,
    depth2: int = 7,
    num_games: int = 1,
    alternate_first: bool = True,
    render: bool = True,
    seed: int = 42,
    config: Optional[str] = None,
):
    """
    Play agent vs agent games.

    Args:
        agent1_type: Type of agent1 ('alphabeta', 'heuristic', 'random' or 'strategic')
        agent2_type: Type of agent2 ('alphabeta', 'heuristic', 'random' or 'strategic')
        depth1: Search depth of agent1 when it is 'alphabeta'
        depth2: Search depth of agent2 when it is 'alphabeta'
        num_games: Number of games to play
        alternate_first: Swap who moves first every other game
        render: Whether to render games
        seed: Random seed
        config: YAML config file; overrides every other option
    """
    if config is not None:
        app_cfg = load_config(config)
    else:
        app_cfg = AppConfig(
            agent1=AgentConfig(
                id=agent1_type, params={"depth": depth1} if agent1_type == "alphabeta" else {}
            ),
            agent2=AgentConfig(
                id=agent2_type, params={"depth": depth2} if agent2_type == "alphabeta" else {}
            ),
            match=MatchConfig(num_games=num_games, alternate_first=alternate_first, render=render),
            seed=seed,
        )

    base_seed = app_cfg.seed
    agent1 = build_agent(app_cfg.agent1, seed=base_seed)
    agent2 = build_agent(app_cfg.agent2, seed=None if base_seed is None else base_seed + 1)

    print("=" * 50)
    print("Connect Four - Agent vs Agent")
    print(f"Agent 1: {agent1.name}")
    print(f"Agent 2: {agent2.name}")
    print("=" * 50)

    match = app_cfg.match
    agent1_wins, draws, agent2_wins = play_match(
        agent1,
        agent2,
        num_games=match.num_games,
        alternate_first=match.alternate_first,
        render=match.render,
    )

    total = match.num_games
    print("=" * 50)
    print("Results Summary")
    print("=" * 50)
    print(f"Agent 1 wins: {agent1_wins} ({agent1_wins/total*100:.1f}%)")
    print(f"Agent 2 wins: {agent2_wins} ({agent2_wins/total*100:.1f}%)")
    print(f"Draws: {draws} ({draws/total*100:.1f}%)")
    print("=" * 50)
    return agent1_wins, draws, agent2_wins


def main() -> None:
    tyro.cli(play_agent_vs_agent)


if __name__ == "__main__":
    main()

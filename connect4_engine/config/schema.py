"""Configuration schema for matches and search settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from connect4_engine.search import SearchConfig, WindowWeights, center_out_order
from connect4_engine.games.connect4 import CONNECT4_COLS

_SEARCH_KEYS = {"depth", "use_alpha_beta", "column_order", "weights"}


def search_config_from_dict(data: Optional[Dict[str, Any]]) -> SearchConfig:
    """Build a SearchConfig from plain data (e.g. the ``params`` of an alphabeta agent)."""
    data = dict(data or {})
    unknown = set(data) - _SEARCH_KEYS
    if unknown:
        raise ValueError(f"Unknown search settings: {sorted(unknown)}")

    weights_data = data.get("weights") or {}
    if not isinstance(weights_data, dict):
        raise ValueError(f"search weights must be a mapping, got {type(weights_data)}")
    weights = WindowWeights(
        win_score=int(weights_data.get("win_score", WindowWeights.win_score)),
        three_score=int(weights_data.get("three_score", WindowWeights.three_score)),
    )

    column_order = data.get("column_order")
    if column_order is None:
        column_order = center_out_order(CONNECT4_COLS)

    return SearchConfig(
        depth=int(data.get("depth", SearchConfig.depth)),
        use_alpha_beta=bool(data.get("use_alpha_beta", SearchConfig.use_alpha_beta)),
        column_order=tuple(column_order),
        weights=weights,
    )


@dataclass
class AgentConfig:
    id: str
    params: Dict[str, Any] = field(default_factory=dict)


@dataclass
class MatchConfig:
    num_games: int = 1
    alternate_first: bool = True
    render: bool = False

    def __post_init__(self) -> None:
        if self.num_games < 1:
            raise ValueError(f"match.num_games must be >= 1, got {self.num_games}")


@dataclass
class AppConfig:
    agent1: AgentConfig
    agent2: AgentConfig
    match: MatchConfig = field(default_factory=MatchConfig)
    seed: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        agents = []
        for key in ("agent1", "agent2"):
            agent_data = data.get(key)
            if agent_data is None:
                raise ValueError(f"{key} is required")
            agents.append(
                AgentConfig(id=str(agent_data["id"]), params=dict(agent_data.get("params") or {}))
            )

        match_data = data.get("match", {})
        match = MatchConfig(
            num_games=int(match_data.get("num_games", 1)),
            alternate_first=bool(match_data.get("alternate_first", True)),
            render=bool(match_data.get("render", False)),
        )

        seed = data.get("seed")
        if seed is not None:
            seed = int(seed)

        return cls(agent1=agents[0], agent2=agents[1], match=match, seed=seed)


def load_config(path: Union[str, Path]) -> AppConfig:
    """Load AppConfig from a YAML file."""
    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data)}")
    return AppConfig.from_dict(data)

"""Agent modules."""

from .base_agent import BaseAgent
from .random_agent import RandomAgent
from .heuristic_agent import HeuristicAgent
from .strategic_agent import StrategicAgent, gives_opponent_win
from .alphabeta_agent import AlphaBetaAgent
from ..registry import list_agents, register_agent

if "alphabeta" not in list_agents():
    register_agent("alphabeta", AlphaBetaAgent.from_params, name="AlphaBetaConnect4Bot")
if "random" not in list_agents():
    register_agent("random", RandomAgent)
if "heuristic" not in list_agents():
    register_agent("heuristic", HeuristicAgent)
if "strategic" not in list_agents():
    register_agent("strategic", StrategicAgent)

__all__ = [
    "BaseAgent",
    "AlphaBetaAgent",
    "HeuristicAgent",
    "RandomAgent",
    "StrategicAgent",
    "gives_opponent_win",
]

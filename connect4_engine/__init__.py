"""Connect4 move selection by fixed-depth alpha-beta search."""

from .agents import AlphaBetaAgent, BaseAgent, HeuristicAgent, RandomAgent, StrategicAgent
from .games.connect4 import Connect4Board, InvalidBoardError, InvalidMoveError
from .search import AlphaBetaSearch, SearchConfig, SearchResult

__all__ = [
    "AlphaBetaAgent",
    "AlphaBetaSearch",
    "BaseAgent",
    "Connect4Board",
    "HeuristicAgent",
    "InvalidBoardError",
    "InvalidMoveError",
    "RandomAgent",
    "SearchConfig",
    "SearchResult",
    "StrategicAgent",
]

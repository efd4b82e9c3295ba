"""Alpha-beta agent: adapts a board snapshot to the search."""

from __future__ import annotations

from typing import Any, Optional

from connect4_engine.config import search_config_from_dict
from connect4_engine.games.connect4 import Connect4Board
from connect4_engine.games.connect4.board import MatrixLike
from connect4_engine.search import AlphaBetaSearch, SearchConfig, SearchResult
from .base_agent import BaseAgent


class AlphaBetaAgent(BaseAgent):
    """
    Plays the column chosen by :class:`AlphaBetaSearch`.

    The snapshot is copied into a fresh :class:`Connect4Board` on every call,
    so concurrent decisions never share a mutable board and the caller's
    matrix is left untouched.
    """

    def __init__(
        self,
        depth: Optional[int] = None,
        config: Optional[SearchConfig] = None,
        name: str = "AlphaBetaConnect4Bot",
    ) -> None:
        if config is None:
            config = SearchConfig() if depth is None else SearchConfig(depth=depth)
        elif depth is not None and depth != config.depth:
            raise ValueError("Pass either depth or config, not conflicting values of both")
        self.search = AlphaBetaSearch(config)
        self._name = name
        self.last_result: Optional[SearchResult] = None

    @classmethod
    def from_params(
        cls,
        name: str = "AlphaBetaConnect4Bot",
        config: Optional[SearchConfig] = None,
        **params: Any,
    ) -> "AlphaBetaAgent":
        """
        Build from registry params: either a prebuilt ``config`` or plain
        search settings (``depth``, ``use_alpha_beta``, ``column_order``,
        ``weights``), never both.
        """
        if config is None:
            config = search_config_from_dict(params)
        elif params:
            raise ValueError(f"Unexpected params alongside config: {sorted(params)}")
        return cls(config=config, name=name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def config(self) -> SearchConfig:
        return self.search.config

    def play(self, board: MatrixLike, player: int) -> int:
        state = Connect4Board.from_matrix(board)
        self.last_result = self.search.search(state, player)
        return self.last_result.column

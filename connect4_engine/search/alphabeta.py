"""Fixed-depth negamax search with alpha-beta pruning for Connect4."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Literal, Optional, Sequence, Tuple

from connect4_engine.games.connect4 import (
    CONNECT4_COLS,
    Connect4Board,
    is_winning_move,
    opponent,
    validate_player,
)
from .move_ordering import center_out_order, validate_column_order
from .value_fn import BoardValueFn, Connect4WindowValueFn, WindowWeights

# Root window; wider than any reachable evaluation on a 6x7 board.
SEARCH_BOUND = 1_000_000_000

SearchReason = Literal["win", "block", "search", "fallback"]


@dataclass(frozen=True)
class SearchConfig:
    depth: int = 7
    use_alpha_beta: bool = True
    column_order: Tuple[int, ...] = field(default_factory=lambda: center_out_order(CONNECT4_COLS))
    weights: WindowWeights = field(default_factory=WindowWeights)

    def __post_init__(self) -> None:
        if self.depth < 1:
            raise ValueError(f"Search depth must be >= 1, got {self.depth}")
        order = validate_column_order(self.column_order, len(self.column_order))
        object.__setattr__(self, "column_order", order)

    @classmethod
    def for_columns(cls, cols: int, **kwargs) -> "SearchConfig":
        """Config with the center-out order for a board of ``cols`` columns."""
        return cls(column_order=center_out_order(cols), **kwargs)


@dataclass
class SearchStats:
    nodes: int = 0
    leaves: int = 0
    cutoffs: int = 0

    def as_dict(self) -> Dict[str, int]:
        return {"nodes": self.nodes, "leaves": self.leaves, "cutoffs": self.cutoffs}


@dataclass
class SearchResult:
    column: int
    reason: SearchReason
    score: Optional[int] = None
    stats: SearchStats = field(default_factory=SearchStats)


def find_winning_column(
    board: Connect4Board,
    player: int,
    order: Sequence[int],
) -> Optional[int]:
    """Try each legal column of ``order`` with a drop and undo; return the first that wins."""
    for col in order:
        if not board.is_legal(col):
            continue
        row = board.drop(col, player)
        try:
            wins = is_winning_move(board, row, col, player)
        finally:
            board.undo(row, col)
        if wins:
            return col
    return None


class AlphaBetaSearch:
    """
    Chooses a column for the player to move.

    Order of preference: a column that wins at once, a column that blocks the
    opponent's immediate win, then the best column of a fixed-depth negamax
    search. The board is mutated in place with drop/undo during the search
    and is back in its original state when any public method returns.
    """

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        value_fn: Optional[BoardValueFn] = None,
    ) -> None:
        self.config = config or SearchConfig()
        self.value_fn = value_fn or Connect4WindowValueFn(self.config.weights)

    def choose_move(self, board: Connect4Board, player: int) -> int:
        return self.search(board, player).column

    def search(self, board: Connect4Board, player: int) -> SearchResult:
        player = validate_player(player)
        order = self._column_order(board)
        stats = SearchStats()

        column = self.find_winning_column(board, player)
        if column is not None:
            return SearchResult(column=column, reason="win", stats=stats)

        column = self.find_winning_column(board, opponent(player))
        if column is not None:
            return SearchResult(column=column, reason="block", stats=stats)

        best_column = -1
        best_score = -math.inf
        alpha, beta = -SEARCH_BOUND, SEARCH_BOUND
        opp = opponent(player)

        for col in order:
            if not board.is_legal(col):
                continue
            row = board.drop(col, player)
            try:
                score = -self.negamax(board, self.config.depth - 1, -beta, -alpha, opp, player, stats)
            finally:
                board.undo(row, col)

            if score > best_score:
                best_score = score
                best_column = col
            # The root never cuts off on beta: every child is scored.
            if self.config.use_alpha_beta and best_score > alpha:
                alpha = best_score

        if best_column == -1:
            legal = board.legal_columns()
            return SearchResult(column=legal[0] if legal else 0, reason="fallback", stats=stats)

        return SearchResult(column=best_column, reason="search", score=int(best_score), stats=stats)

    def find_winning_column(self, board: Connect4Board, player: int) -> Optional[int]:
        """First column in search order where dropping ``player``'s piece wins at once."""
        return find_winning_column(board, player, self._column_order(board))

    def negamax(
        self,
        board: Connect4Board,
        depth: int,
        alpha: float,
        beta: float,
        player_to_move: int,
        perspective: int,
        stats: Optional[SearchStats] = None,
    ) -> int:
        """
        Score of ``board`` for ``player_to_move`` after ``depth`` more plies.

        Wins inside the tree are not detected here; they only show up through
        the evaluator's four-in-a-row reward once ``depth`` reaches 0. Above
        depth 0 a node with no legal column scores 0 (draw); at depth 0 the
        evaluator runs first, even on a full board.
        """
        if stats is not None:
            stats.nodes += 1

        if depth == 0:
            if stats is not None:
                stats.leaves += 1
            sign = 1 if player_to_move == perspective else -1
            return sign * self.value_fn.evaluate(board, perspective)

        best = -math.inf
        any_legal = False
        next_player = opponent(player_to_move)
        use_alpha_beta = self.config.use_alpha_beta

        for col in self._column_order(board):
            if not board.is_legal(col):
                continue
            any_legal = True
            row = board.drop(col, player_to_move)
            try:
                score = -self.negamax(
                    board, depth - 1, -beta, -alpha, next_player, perspective, stats
                )
            finally:
                board.undo(row, col)

            if score > best:
                best = score

            if use_alpha_beta:
                if best > alpha:
                    alpha = best
                if alpha >= beta:
                    if stats is not None:
                        stats.cutoffs += 1
                    return alpha

        if not any_legal:
            return 0
        return best

    def _column_order(self, board: Connect4Board) -> Tuple[int, ...]:
        order = self.config.column_order
        if len(order) != board.cols:
            raise ValueError(
                f"Column order covers {len(order)} columns, board has {board.cols}"
            )
        return order

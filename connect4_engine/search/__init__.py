"""Alpha-beta search, move ordering and position evaluation."""

from .alphabeta import (
    SEARCH_BOUND,
    AlphaBetaSearch,
    SearchConfig,
    SearchResult,
    SearchStats,
    find_winning_column,
)
from .move_ordering import center_out_order, validate_column_order
from .value_fn import (
    BoardValueFn,
    Connect4WindowValueFn,
    WindowWeights,
    evaluate_board,
    window_indices,
)

__all__ = [
    "SEARCH_BOUND",
    "AlphaBetaSearch",
    "BoardValueFn",
    "Connect4WindowValueFn",
    "SearchConfig",
    "SearchResult",
    "SearchStats",
    "WindowWeights",
    "center_out_order",
    "evaluate_board",
    "find_winning_column",
    "validate_column_order",
    "window_indices",
]

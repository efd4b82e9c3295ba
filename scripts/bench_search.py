"""Benchmark: nodes searched and time per decision on fixed positions.

Run before and after touching the search or the evaluator. Fewer nodes at
the same depth means better pruning; higher nodes/s means a faster evaluator.

Usage: python scripts/bench_search.py --depth 7 [--no-pruning]
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from connect4_engine.games.connect4 import PLAYER_ONE, PLAYER_TWO, Connect4Game
from connect4_engine.search import AlphaBetaSearch, SearchConfig

# Column sequences from the empty board; none of them ends the game.
POSITIONS = [
    ("Empty", []),
    ("After center", [3]),
    ("Center stack", [3, 3, 4, 2]),
    ("Early middle", [3, 2, 3, 3, 4, 4, 2, 5]),
    ("Left heavy", [0, 1, 0, 1, 2, 0, 1, 2, 3, 6]),
]


def run_position(label: str, moves: list[int], config: SearchConfig) -> dict:
    game = Connect4Game()
    state = game.initial_state()
    for col in moves:
        state = game.apply_action(state, col)
    if game.is_terminal(state):
        raise ValueError(f"Position '{label}' is already finished")

    board = state.board.copy()
    search = AlphaBetaSearch(config)
    start = time.perf_counter()
    result = search.search(board, state.current_player)
    elapsed = time.perf_counter() - start

    row = {
        "label": label,
        "column": result.column,
        "reason": result.reason,
        "pieces": board.count(PLAYER_ONE) + board.count(PLAYER_TWO),
        "time_ms": int(elapsed * 1000),
        "nps": int(result.stats.nodes / elapsed) if elapsed > 0 else 0,
    }
    row.update(result.stats.as_dict())
    return row


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--depth", type=int, default=7)
    parser.add_argument("--no-pruning", action="store_true")
    args = parser.parse_args()

    config = SearchConfig(depth=args.depth, use_alpha_beta=not args.no_pruning)
    print(f"Depth {config.depth}, alpha-beta {'on' if config.use_alpha_beta else 'off'}")
    print()
    print(
        f"{'Position':<14} {'Pcs':>3} {'Col':>3} {'Reason':<8} {'Nodes':>10} "
        f"{'Cutoffs':>8} {'N/s':>8} {'Time(ms)':>9}"
    )
    print("-" * 70)

    results = []
    for label, moves in POSITIONS:
        r = run_position(label, moves, config)
        results.append(r)
        print(
            f"{r['label']:<14} {r['pieces']:>3} {r['column']:>3} {r['reason']:<8} {r['nodes']:>10,} "
            f"{r['cutoffs']:>8,} {r['nps']:>8,} {r['time_ms']:>9,}"
        )

    print("-" * 70)
    total_nodes = sum(r["nodes"] for r in results)
    total_ms = sum(r["time_ms"] for r in results)
    print(f"{'TOTAL':<14} {'':>3} {'':>3} {'':<8} {total_nodes:>10,} {'':>8} {'':>8} {total_ms:>9,}")


if __name__ == "__main__":
    main()

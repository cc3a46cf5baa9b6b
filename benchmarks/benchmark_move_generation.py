"""
Micro-benchmark script to compare exhaustive vs frontier-based move search.

This script generates representative board states and times both search
modes of ``LegalMoveGenerator``.

NOTE: This is a non-deterministic benchmark and should not be used as a test assertion.
It is intended as a development tool for performance analysis only.

Usage:
    python -m benchmarks.benchmark_move_generation --runs 20
"""

import argparse
import logging
import time
from typing import Dict, List, Optional

from bento_blocks.config import EngineConfig
from bento_blocks.move_generator import LegalMoveGenerator
from tests.utils_game_states import generate_random_valid_state
from utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)

DEFAULT_STATES = [
    ("Early game", 5),
    ("Early game", 10),
    ("Mid game", 20),
    ("Mid game", 30),
    ("Late game", 40),
]


def time_generator(generator: LegalMoveGenerator, board, player_id: int, num_runs: int):
    """
    Time ``get_legal_moves`` over ``num_runs`` calls.

    Returns:
        Tuple of (average_time_ms, num_moves_generated)
    """
    times = []
    num_moves = None
    for _ in range(num_runs):
        start = time.perf_counter()
        moves = generator.get_legal_moves(board, player_id)
        times.append((time.perf_counter() - start) * 1000.0)
        if num_moves is None:
            num_moves = len(moves)
    return sum(times) / len(times), num_moves


def run_benchmark(states, num_runs: int) -> List[Dict]:
    config = EngineConfig()
    naive = LegalMoveGenerator(config, use_frontier=False)
    frontier = LegalMoveGenerator(config, use_frontier=True)

    results = []
    for state_label, num_moves in states:
        state_name = f"{state_label} ({num_moves} moves)"
        board = generate_random_valid_state(num_moves, seed=num_moves)
        player_id = board.current_player

        naive_avg, naive_moves = time_generator(naive, board, player_id, num_runs)
        frontier_avg, frontier_moves = time_generator(frontier, board, player_id, num_runs)
        if naive_moves != frontier_moves:
            logger.warning(f"{state_name}: move counts differ, naive={naive_moves}, frontier={frontier_moves}")

        results.append({
            'name': state_name,
            'player': player_id,
            'naive_avg': naive_avg,
            'frontier_avg': frontier_avg,
            'speedup': naive_avg / frontier_avg if frontier_avg > 0 else float('inf'),
            'num_moves': naive_moves,
            'frontier_size': len(frontier.get_frontier(board, player_id)),
        })
        logger.info(f"{state_name}: naive={naive_avg:.2f}ms, frontier={frontier_avg:.2f}ms")
    return results


def print_summary(results: List[Dict]) -> None:
    print("=" * 72)
    print(f"{'State':<25} {'Naive':<12} {'Frontier':<12} {'Speedup':<10} {'Moves':<8} {'Cells':<6}")
    print("-" * 72)
    for result in results:
        speedup_str = f"{result['speedup']:.2f}x" if result['speedup'] != float('inf') else "N/A"
        print(f"{result['name']:<25} "
              f"{result['naive_avg']:>8.2f}ms  "
              f"{result['frontier_avg']:>8.2f}ms  "
              f"{speedup_str:>8}  "
              f"{result['num_moves']:>6}  "
              f"{result['frontier_size']:>5}")
    print("=" * 72)
    print("Speedup is relative to the exhaustive search. Cells is the frontier size.")


def main(argv: Optional[List[str]] = None) -> List[Dict]:
    parser = argparse.ArgumentParser(description="Benchmark Bento Blocks move search")
    parser.add_argument("--runs", type=int, default=50, help="Timed calls per state")
    parser.add_argument("--moves", type=int, nargs="*",
                        help="Placements before timing, one state per value")
    parser.add_argument("--quiet", action="store_true", help="Skip the summary table")
    args = parser.parse_args(argv)

    setup_logging(EngineConfig.from_env().log_level_value)
    states = [("Custom", n) for n in args.moves] if args.moves else DEFAULT_STATES
    results = run_benchmark(states, max(1, args.runs))
    if not args.quiet:
        print_summary(results)
    return results


if __name__ == "__main__":
    main()

"""Command-line interface for the N-Queens annealing sweep.

This module wires the fixed experiment grid from ``settings`` to the sweep
runner and prints the final summary. It isolates argument parsing and console
I/O from the board and annealer modules so those remain easy to test
programmatically.
"""
from __future__ import annotations

import argparse
import sys
from time import perf_counter
from typing import List, Optional

import numpy as np

from . import settings
from .experiments import run_sweep
from .reporting import format_sweep_summary, print_sweep_summary
from .stats import SweepResults
from nqueens_sa.board import Board
from nqueens_sa.simulated_annealing import sa_nqueens, simulated_annealing
from nqueens_sa.utils import conflicts, is_valid_solution


# ------------- Pipeline ----------------------------------------------------

def run_default_sweep(
    seed: Optional[int] = None,
    show_boards: bool = True,
    validate: bool = False,
) -> SweepResults:
    """Run the fixed grid with one generator seeded from ``seed`` (or OS entropy)."""
    rng = np.random.default_rng(seed)
    start_total = perf_counter()

    results = run_sweep(
        settings.BOARD_SIZES,
        settings.SCHEDULES,
        settings.RUNS_PER_CONFIG,
        rng,
        show_boards=show_boards,
        progress_label="Board sizes",
        validate=validate,
    )

    print_sweep_summary(results)
    total_time = perf_counter() - start_total
    print(f"\nSweep completed in {total_time:.1f}s")
    return results


# ------------- Quick regression -------------------------------------------

def run_quick_regression_tests() -> None:
    """Execute a fast, seeded smoke test of the board, the annealer and the sweep.

    Verifies that:
    - the canonical 4-queens placement has zero cost and a stacked placement
      has the maximal cost;
    - a seeded 8-queens annealing run terminates with a consistent result;
    - a one-size sweep produces a printable summary.
    """
    print("Running quick regression tests...")

    solved = Board.from_rows([1, 3, 0, 2])
    if solved.cost() != 0 or not is_valid_solution(solved.rows()):
        raise AssertionError("Canonical 4-queens placement should have zero cost.")
    stacked = Board.from_rows([0, 0, 0, 0])
    if stacked.cost() != 6:
        raise AssertionError(f"Stacked 4-queens placement should cost 6, got {stacked.cost()}.")
    print("  Board: cost checks passed")

    rng = np.random.default_rng(42)
    success, steps, elapsed, initial_cost, final_cost, evals, final = sa_nqueens(8, 0.9, 1e-6, rng=rng)
    if final_cost != conflicts(final.rows()):
        raise AssertionError("Annealer final cost disagrees with the O(N) conflict counter.")
    if success != (final_cost == 0) or evals != steps + 1:
        raise AssertionError("Annealer counters are inconsistent.")
    print(
        f"  Simulated Annealing: N=8 H {initial_cost} -> {final_cost} "
        f"in {steps} steps ({elapsed:.4f}s)"
    )

    board = Board(4)
    board.randomize(rng)
    result = simulated_annealing(board, 0.5, 1e-8, rng=rng)
    if not result.is_initialized():
        raise AssertionError("Annealer returned a board violating one-queen-per-column.")

    results = run_sweep([4], [(0.5, 1e-8)], 3, rng, show_boards=False)
    if results[4][(0.5, 1e-8)]["total_runs"] != 3 or not format_sweep_summary(results):
        raise AssertionError("Sweep did not produce the expected summary.")

    print("Quick regression tests passed.")


# ------------- CLI wiring --------------------------------------------------

def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Solve N-Queens with simulated annealing over a fixed grid of board sizes and schedules."
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random generator (default: OS entropy).")
    parser.add_argument("--no-boards", action="store_true", help="Do not print initial and final grids of each run.")
    parser.add_argument("--quick-test", action="store_true", help="Run quick regression tests and exit.")
    parser.add_argument("--validate", action="store_true", help="Cross-check every solved board with an independent conflict counter.")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point: parse arguments and run the sweep."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.quick_test:
        run_quick_regression_tests()
        return

    try:
        run_default_sweep(seed=args.seed, show_boards=not args.no_boards, validate=args.validate)
    except KeyboardInterrupt:
        print("\nExecution interrupted by user.", file=sys.stderr)
        raise SystemExit(130) from None
    except ValueError as exc:
        print(f"Execution of application ended with the following error:\n{exc}", file=sys.stderr)
        raise SystemExit(1) from exc

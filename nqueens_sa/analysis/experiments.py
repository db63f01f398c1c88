"""Experiment runners for the annealing sweep.

For each board size and each ``(decay_rate, t_threshold)`` schedule the sweep
performs a fixed number of independent runs. Every run starts from a freshly
randomized board, prints its initial and final state, and yields an
``SARecord``. Runs are aggregated per configuration into a
``ScheduleResultEntry`` suitable for the console summary.

Failures are isolated per run: a ``QueensError`` raised by one run is printed
to stderr and recorded in that run's record, and the sweep moves on to the
next run and configuration.
"""
from __future__ import annotations

import sys
from time import perf_counter
from typing import List, Optional

import numpy as np

from . import settings
from .stats import (
    SARecord,
    Schedule,
    ScheduleResultEntry,
    SweepResults,
    ProgressPrinter,
    compute_grouped_statistics,
)
from nqueens_sa.board import Board
from nqueens_sa.errors import InvalidSolution, QueensError
from nqueens_sa.simulated_annealing import anneal
from nqueens_sa.utils import is_valid_solution


def run_single_sa_experiment(
    size: int,
    decay_rate: float,
    t_threshold: float,
    rng: np.random.Generator,
    show_boards: bool = True,
    run_index: int = 1,
    validate: bool = False,
) -> SARecord:
    """Randomize one board, anneal it, and report both states on stdout.

    Raises
    ------
    QueensError
        Propagated from the board or the annealer; callers decide whether to
        isolate it.
    InvalidSolution
        When ``validate`` is set and a zero-cost board fails the independent
        validity check.
    """
    board = Board(size)
    board.randomize(rng)
    initial_cost = board.cost()
    print(f"Simulation number {run_index} with initial H = {initial_cost} - Initial State:")
    if show_boards:
        board.print_board()

    start = perf_counter()
    trace = anneal(
        board,
        decay_rate,
        t_threshold,
        rng=rng,
        initial_temperature=settings.INITIAL_TEMPERATURE,
    )
    elapsed = perf_counter() - start

    final = trace.board
    final_cost = final.cost()
    print(f"Final state of (H = {final_cost}):")
    if show_boards:
        final.print_board()
        print()

    if validate and final_cost == 0 and not is_valid_solution(final.rows()):
        raise InvalidSolution(f"Zero-cost board for N={size} is not a valid solution: {final.rows()}")

    return {
        "success": final_cost == 0,
        "steps": trace.iterations,
        "time": elapsed,
        "initial_cost": initial_cost,
        "final_cost": final_cost,
        "evals": trace.evaluations,
        "error": None,
    }


def _error_record(exc: Exception) -> SARecord:
    return {
        "success": False,
        "steps": 0,
        "time": 0.0,
        "initial_cost": None,
        "final_cost": None,
        "evals": 0,
        "error": f"{type(exc).__name__}: {exc}",
    }


def run_schedule(
    size: int,
    schedule: Schedule,
    runs: int,
    rng: np.random.Generator,
    show_boards: bool = True,
    validate: bool = False,
) -> ScheduleResultEntry:
    """Execute ``runs`` independent runs for one (size, schedule) pair."""
    decay_rate, t_threshold = schedule
    print(
        f"\nNow running simulations for Decay Rate of {decay_rate:g} "
        f"and T Threshold of {t_threshold:g}\n"
    )

    sa_runs: List[SARecord] = []
    for run_index in range(1, runs + 1):
        try:
            record = run_single_sa_experiment(
                size,
                decay_rate,
                t_threshold,
                rng,
                show_boards=show_boards,
                run_index=run_index,
                validate=validate,
            )
        except QueensError as exc:
            print(
                f"Simulation number {run_index} (N={size}, decay={decay_rate:g}, "
                f"threshold={t_threshold:g}) failed with {type(exc).__name__}: {exc}",
                file=sys.stderr,
            )
            record = _error_record(exc)
        sa_runs.append(record)

    stats = compute_grouped_statistics(sa_runs)
    completed = stats["successes"] + stats["failures"]
    if stats["average_final_cost"] is not None:
        print(
            f"Average H value of final solutions throughout {completed} runs is "
            f"{stats['average_final_cost']:g}"
        )
    else:
        print("No run completed for this configuration.")

    entry: ScheduleResultEntry = {
        "n": size,
        "decay_rate": decay_rate,
        "t_threshold": t_threshold,
        "success_rate": stats["success_rate"],
        "failure_rate": stats["failure_rate"],
        "error_rate": stats["error_rate"],
        "total_runs": stats["total_runs"],
        "successes": stats["successes"],
        "failures": stats["failures"],
        "errors": stats["errors"],
        "average_final_cost": stats["average_final_cost"],
        "all_steps": stats["all_steps"],
        "all_time": stats["all_time"],
        "all_evals": stats["all_evals"],
        "all_initial_cost": stats["all_initial_cost"],
        "all_final_cost": stats["all_final_cost"],
        "success_steps": stats["success_steps"],
        "success_time": stats["success_time"],
        "failure_final_cost": stats["failure_final_cost"],
        "raw_runs": sa_runs.copy(),
    }
    return entry


def run_sweep(
    board_sizes: List[int],
    schedules: List[Schedule],
    runs: int,
    rng: np.random.Generator,
    show_boards: bool = True,
    progress_label: Optional[str] = None,
    validate: bool = False,
) -> SweepResults:
    """Run every (size, schedule) combination of the grid.

    Parameters
    ----------
    board_sizes : List[int]
        Board dimensions, processed in the given order.
    schedules : List[Schedule]
        ``(decay_rate, t_threshold)`` pairs tried for every size.
    runs : int
        Independent runs per combination.
    rng : numpy.random.Generator
        Single random source threaded through every run of the sweep.
    show_boards : bool, default True
        Print the initial and final grids of every run.
    progress_label : str | None
        When set, print a progress line per board size.
    validate : bool, default False
        Cross-check zero-cost boards with ``is_valid_solution``.

    Returns
    -------
    SweepResults
        ``results[size][(decay_rate, t_threshold)]`` aggregates.
    """
    results: SweepResults = {}
    progress = ProgressPrinter(len(board_sizes), progress_label) if progress_label else None
    banner = "#" * settings.BANNER_WIDTH

    for index, size in enumerate(board_sizes, start=1):
        if progress:
            progress.update(index, f"N={size}")
        print(f"\n{banner}")
        print(f"Now running simulations for board size of {size}")
        print(banner)

        results[size] = {}
        for schedule in schedules:
            results[size][schedule] = run_schedule(
                size,
                schedule,
                runs,
                rng,
                show_boards=show_boards,
                validate=validate,
            )

    return results

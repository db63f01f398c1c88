"""Typed result shapes and statistics helpers for the annealing sweep.

Defines ``TypedDict`` structures for per-run records and per-configuration
aggregates, and utilities to summarize them by outcome.
"""
from __future__ import annotations

import statistics
from typing import Any, Dict, List, Optional, Tuple, TypedDict

Schedule = Tuple[float, float]

METRICS = ["steps", "time", "evals", "initial_cost", "final_cost"]


class StatsSummary(TypedDict, total=False):
    count: int
    mean: Optional[float]
    median: Optional[float]
    std: Optional[float]
    min: Optional[float]
    max: Optional[float]
    q25: Optional[float]
    q75: Optional[float]
    range: Optional[float]


class SARecord(TypedDict):
    success: bool
    steps: int
    time: float
    initial_cost: Optional[int]
    final_cost: Optional[int]
    evals: int
    error: Optional[str]


class ScheduleResultEntry(TypedDict, total=False):
    n: int
    decay_rate: float
    t_threshold: float
    success_rate: float
    failure_rate: float
    error_rate: float
    total_runs: int
    successes: int
    failures: int
    errors: int
    average_final_cost: Optional[float]
    all_steps: StatsSummary
    all_time: StatsSummary
    all_evals: StatsSummary
    all_initial_cost: StatsSummary
    all_final_cost: StatsSummary
    success_steps: StatsSummary
    success_time: StatsSummary
    failure_final_cost: StatsSummary
    raw_runs: List[SARecord]


SweepResults = Dict[int, Dict[Schedule, ScheduleResultEntry]]


class ProgressPrinter:
    """Minimal, stdout-only progress reporter for long-running loops.

    Parameters
    ----------
    total : int
        Total number of steps expected; values <= 0 are coerced to 1.
    label : str
        Short label printed in front of the counters.
    """

    def __init__(self, total: int, label: str):
        self.total = max(1, total)
        self.label = label

    def update(self, index: int, detail: str = "") -> None:
        percent = (index / self.total) * 100
        suffix = f" - {detail}" if detail else ""
        print(f"[{self.label}] {index}/{self.total} ({percent:.0f}%)" + suffix)


def compute_detailed_statistics(values: List[float]) -> StatsSummary:
    """Compute summary statistics for a numeric sequence.

    Returns count, mean, median, population std, min, max, 25th/75th
    percentiles and range. On empty input every numeric field is ``None`` and
    ``count`` is 0 so downstream tables stay rectangular.
    """
    if not values:
        return {
            "count": 0,
            "mean": None,
            "median": None,
            "std": None,
            "min": None,
            "max": None,
            "q25": None,
            "q75": None,
            "range": None,
        }

    ordered = sorted(values)
    n = len(ordered)
    low, high = ordered[0], ordered[-1]
    return {
        "count": n,
        "mean": statistics.mean(ordered),
        "median": statistics.median(ordered),
        "std": statistics.pstdev(ordered) if n > 1 else 0,
        "min": low,
        "max": high,
        "q25": ordered[n // 4] if n >= 4 else low,
        "q75": ordered[3 * n // 4] if n >= 4 else high,
        "range": high - low,
    }


def compute_grouped_statistics(runs: List[SARecord]) -> Dict[str, Any]:
    """Aggregate per-run records by outcome.

    Runs are split into three groups: ``success`` (final cost 0), ``failure``
    (the schedule cooled down before a solution was found) and ``error`` (the
    run raised and produced no final board). Errored runs are excluded from the
    metric summaries since their counters are meaningless.

    Returns
    -------
    Dict[str, Any]
        Counters, rates, ``average_final_cost`` over completed runs, and
        ``all_<metric>`` summaries for every metric in ``METRICS`` plus
        ``success_steps``, ``success_time`` and ``failure_final_cost``.
    """
    completed = [r for r in runs if r["error"] is None]
    successes = [r for r in completed if r["success"]]
    failures = [r for r in completed if not r["success"]]
    errors = [r for r in runs if r["error"] is not None]
    total = len(runs)

    stats: Dict[str, Any] = {
        "total_runs": total,
        "successes": len(successes),
        "failures": len(failures),
        "errors": len(errors),
        "success_rate": len(successes) / total if total else 0,
        "failure_rate": len(failures) / total if total else 0,
        "error_rate": len(errors) / total if total else 0,
    }

    final_costs = [r["final_cost"] for r in completed if r["final_cost"] is not None]
    stats["average_final_cost"] = statistics.mean(final_costs) if final_costs else None

    for metric in METRICS:
        values = [r[metric] for r in completed if r[metric] is not None]  # type: ignore[literal-required]
        stats[f"all_{metric}"] = compute_detailed_statistics(values)

    stats["success_steps"] = compute_detailed_statistics([r["steps"] for r in successes])
    stats["success_time"] = compute_detailed_statistics([r["time"] for r in successes])
    stats["failure_final_cost"] = compute_detailed_statistics(
        [r["final_cost"] for r in failures if r["final_cost"] is not None]
    )
    return stats

"""Console summaries of sweep results.

The sweep prints every run as it happens; this module condenses the
aggregates into one table with a row per (board size, schedule). Column names
follow lowercase snake_case.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, TextIO

import pandas as pd

from .stats import StatsSummary, SweepResults

SUMMARY_COLUMNS = [
    "n",
    "decay_rate",
    "t_threshold",
    "runs",
    "successes",
    "errors",
    "success_rate",
    "avg_final_cost",
    "min_final_cost",
    "max_final_cost",
    "mean_steps",
    "mean_time_seconds",
]


def _stat(summary: Optional[StatsSummary], key: str) -> Optional[float]:
    if not summary:
        return None
    return summary.get(key)  # type: ignore[return-value]


def build_summary_frame(results: SweepResults) -> pd.DataFrame:
    """Flatten sweep aggregates into a ``DataFrame`` (one row per configuration)."""
    rows: List[Dict[str, Any]] = []
    for size in sorted(results):
        for (decay_rate, t_threshold), entry in results[size].items():
            rows.append(
                {
                    "n": size,
                    "decay_rate": decay_rate,
                    "t_threshold": t_threshold,
                    "runs": entry.get("total_runs", 0),
                    "successes": entry.get("successes", 0),
                    "errors": entry.get("errors", 0),
                    "success_rate": entry.get("success_rate", 0.0),
                    "avg_final_cost": entry.get("average_final_cost"),
                    "min_final_cost": _stat(entry.get("all_final_cost"), "min"),
                    "max_final_cost": _stat(entry.get("all_final_cost"), "max"),
                    "mean_steps": _stat(entry.get("all_steps"), "mean"),
                    "mean_time_seconds": _stat(entry.get("all_time"), "mean"),
                }
            )
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def format_sweep_summary(results: SweepResults) -> str:
    """Render the summary table as fixed-width text."""
    frame = build_summary_frame(results)
    if frame.empty:
        return "No configurations were run."
    return frame.to_string(
        index=False,
        na_rep="-",
        formatters={
            "decay_rate": "{:g}".format,
            "t_threshold": "{:g}".format,
            "success_rate": "{:.0%}".format,
        },
        float_format=lambda value: f"{value:.4g}",
    )


def print_sweep_summary(results: SweepResults, file: Optional[TextIO] = None) -> None:
    """Print a titled summary table of the sweep."""
    print("\n" + "=" * 70, file=file)
    print("SWEEP SUMMARY", file=file)
    print("=" * 70, file=file)
    print(format_sweep_summary(results), file=file)

"""
Sweep orchestration and reporting for the N-Queens annealer.

This package contains:
- settings: the fixed grid of board sizes, schedules and run counts
- stats: typed run records and aggregation helpers
- experiments: per-run, per-schedule and full-grid runners
- reporting: console summary table
- cli: argument parser and entry point
"""

from . import settings as settings  # re-export for convenience
from .stats import (
    StatsSummary,
    SARecord,
    ScheduleResultEntry,
    SweepResults,
    compute_detailed_statistics,
    compute_grouped_statistics,
    ProgressPrinter,
)

__all__ = [
    # types
    "StatsSummary",
    "SARecord",
    "ScheduleResultEntry",
    "SweepResults",
    # utils
    "compute_detailed_statistics",
    "compute_grouped_statistics",
    "ProgressPrinter",
    # settings module
    "settings",
]

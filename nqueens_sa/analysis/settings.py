"""Fixed experiment grid for the N-Queens annealing sweep.

The sweep always covers the same board sizes and cooling schedules; these
module-level constants are the single place where they are defined.
"""
from __future__ import annotations

from typing import List, Tuple

# Board sizes to evaluate (in ascending order)
BOARD_SIZES: List[int] = [4, 8, 16, 32]

# Annealing schedules as (decay_rate, t_threshold) pairs
SCHEDULES: List[Tuple[float, float]] = [
    (0.9, 1e-6),
    (0.75, 1e-7),
    (0.5, 1e-8),
]

# Independent runs per (board size, schedule) combination
RUNS_PER_CONFIG: int = 10

# Starting temperature of every run
INITIAL_TEMPERATURE: float = 100.0

# Width of the banner printed before each board size
BANNER_WIDTH: int = 66

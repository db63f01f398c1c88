"""N-Queens solved by simulated annealing over a one-queen-per-column board."""

from .board import Board, Location
from .errors import InvalidDimension, InvalidSchedule, InvalidSolution, OutOfBounds, QueensError, UninitializedState
from .simulated_annealing import (
    INITIAL_TEMPERATURE,
    acceptance_probability,
    anneal,
    sa_nqueens,
    simulated_annealing,
    validate_schedule,
)
from .utils import conflicts, conflicts_on2, is_valid_solution

__all__ = [
    "Board",
    "Location",
    "QueensError",
    "InvalidDimension",
    "OutOfBounds",
    "UninitializedState",
    "InvalidSchedule",
    "InvalidSolution",
    "INITIAL_TEMPERATURE",
    "acceptance_probability",
    "anneal",
    "sa_nqueens",
    "simulated_annealing",
    "validate_schedule",
    "conflicts",
    "conflicts_on2",
    "is_valid_solution",
]

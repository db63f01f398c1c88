"""Simulated Annealing driver for the N-Queens problem.

The search state is a ``Board`` holding one queen per column. Each iteration
cools the temperature geometrically, generates the full neighbourhood of the
current board (every single-queen move within a column), picks one neighbour
uniformly at random and accepts it with the Metropolis rule:

- ``delta = cost(current) - cost(candidate)``;
- ``delta > 0`` (strict improvement): always accepted;
- otherwise accepted with probability ``min(1, exp(delta / T))``, so sideways
  moves (``delta == 0``) are always taken and uphill moves become rarer as
  ``T`` shrinks.

The search stops as soon as the current board has zero cost, or when a decay
step brings the temperature to or below ``t_threshold``. In the latter case the
current board is returned as-is, which is a best-effort result.

Contract (public API)
---------------------
- ``simulated_annealing(initial, decay_rate, t_threshold, rng=None)`` returns
  the terminal ``Board``. ``initial`` is copied and never mutated.
- ``sa_nqueens(size, decay_rate, t_threshold, rng=None)`` builds a random board
  and returns a 7-tuple ``SAResult``:
    (success, iterations, elapsed_seconds, initial_cost, final_cost, evaluations, final_board)

Where:
- success: True when the final board has zero cost.
- iterations: number of candidate moves evaluated.
- elapsed_seconds: wall time measured via ``perf_counter()``.
- initial_cost / final_cost: attacking pairs before and after the search.
- evaluations: number of cost evaluations (initial board included).

Schedules
---------
``decay_rate`` must lie strictly inside ``(0, 1)``: a rate of 1.0 never cools
and is rejected. A threshold <= 0 is allowed; termination then depends on
reaching cost 0 (or, for a threshold of exactly 0, on the temperature
underflowing to 0.0).

Determinism
-----------
All randomness comes from one ``numpy.random.Generator`` per run. Pass a seeded
generator for reproducible runs; when omitted, a freshly seeded generator is
created per call.
"""

from __future__ import annotations

import math
from time import perf_counter
from typing import NamedTuple, Optional, Tuple

import numpy as np

from .board import Board
from .errors import InvalidSchedule


INITIAL_TEMPERATURE = 100.0

SAResult = Tuple[bool, int, float, int, int, int, Board]


class AnnealTrace(NamedTuple):
    """Terminal board of one annealing run plus its search counters."""

    board: Board
    iterations: int
    evaluations: int
    accepted: int
    final_temperature: float


def validate_schedule(
    decay_rate: float,
    t_threshold: float,
    initial_temperature: float = INITIAL_TEMPERATURE,
) -> None:
    """Reject schedules that cannot cool or are not finite numbers.

    Raises
    ------
    InvalidSchedule
        If ``decay_rate`` is not strictly between 0 and 1, if ``t_threshold``
        is not finite, or if ``initial_temperature`` is not a positive finite
        number.
    """
    if not math.isfinite(decay_rate) or not 0.0 < decay_rate < 1.0:
        raise InvalidSchedule(f"Decay rate must be strictly between 0 and 1, got {decay_rate!r}")
    if not math.isfinite(t_threshold):
        raise InvalidSchedule(f"Temperature threshold must be finite, got {t_threshold!r}")
    if not math.isfinite(initial_temperature) or initial_temperature <= 0.0:
        raise InvalidSchedule(f"Initial temperature must be positive, got {initial_temperature!r}")


def acceptance_probability(delta: float, temperature: float) -> float:
    """Return the Metropolis probability of moving to a candidate.

    Parameters
    ----------
    delta : float
        ``cost(current) - cost(candidate)``; positive means the candidate is better.
    temperature : float
        Current temperature. At ``0.0`` only non-worsening moves are accepted.
    """
    if delta > 0:
        return 1.0
    if temperature <= 0.0:
        return 1.0 if delta == 0 else 0.0
    return min(1.0, math.exp(delta / temperature))


def accept_move(delta: float, temperature: float, rng: np.random.Generator) -> bool:
    """Decide a single move; improvements are accepted without drawing."""
    if delta > 0:
        return True
    return bool(rng.random() < acceptance_probability(delta, temperature))


def anneal(
    initial: Board,
    decay_rate: float,
    t_threshold: float,
    rng: Optional[np.random.Generator] = None,
    initial_temperature: float = INITIAL_TEMPERATURE,
) -> AnnealTrace:
    """Run the annealing loop and return the terminal board with counters.

    Raises
    ------
    InvalidSchedule
        For a schedule rejected by ``validate_schedule``.
    UninitializedState
        If ``initial`` does not hold exactly one queen per column.
    """
    validate_schedule(decay_rate, t_threshold, initial_temperature)
    if rng is None:
        rng = np.random.default_rng()

    current = initial.copy()
    evaluations = 1
    iterations = 0
    accepted = 0
    temperature = initial_temperature

    while current.cost() != 0:
        temperature *= decay_rate
        if temperature <= t_threshold:
            break

        successors = current.successors()
        candidate = successors[int(rng.integers(len(successors)))]
        # Only the chosen neighbour may outlive the batch
        del successors
        delta = current.cost() - candidate.cost()
        evaluations += 1
        iterations += 1

        if accept_move(delta, temperature, rng):
            current = candidate
            accepted += 1
        del candidate

    return AnnealTrace(current, iterations, evaluations, accepted, temperature)


def simulated_annealing(
    initial: Board,
    decay_rate: float,
    t_threshold: float,
    rng: Optional[np.random.Generator] = None,
    initial_temperature: float = INITIAL_TEMPERATURE,
) -> Board:
    """Anneal from ``initial`` and return the terminal board.

    The result is either a solution (cost 0) or the board held when the
    temperature fell to or below ``t_threshold``.
    """
    return anneal(initial, decay_rate, t_threshold, rng=rng, initial_temperature=initial_temperature).board


def sa_nqueens(
    size: int,
    decay_rate: float,
    t_threshold: float,
    rng: Optional[np.random.Generator] = None,
    initial_temperature: float = INITIAL_TEMPERATURE,
) -> SAResult:
    """Randomize a ``size x size`` board and anneal it.

    Parameters
    ----------
    size : int
        Board dimension N.
    decay_rate : float
        Geometric cooling factor in ``(0, 1)``; temperature is updated as ``T *= decay_rate``.
    t_threshold : float
        Search stops once the temperature is at or below this value.
    rng : numpy.random.Generator | None
        Random source shared by the initial placement and the search.
    initial_temperature : float, default 100.0
        Starting temperature.

    Returns
    -------
    SAResult
        Tuple (success, iterations, elapsed, initial_cost, final_cost, evaluations, final_board).

    Raises
    ------
    InvalidDimension
        If ``size`` is not a positive integer.
    InvalidSchedule
        If the schedule is rejected by ``validate_schedule``.
    """
    validate_schedule(decay_rate, t_threshold, initial_temperature)
    if rng is None:
        rng = np.random.default_rng()

    board = Board(size)
    board.randomize(rng)
    initial_cost = board.cost()

    start = perf_counter()
    trace = anneal(board, decay_rate, t_threshold, rng=rng, initial_temperature=initial_temperature)
    elapsed = perf_counter() - start

    final_cost = trace.board.cost()
    return final_cost == 0, trace.iterations, elapsed, initial_cost, final_cost, trace.evaluations, trace.board

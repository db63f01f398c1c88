"""Exception hierarchy for the N-Queens annealing package.

Every error raised by the board or the annealer derives from ``QueensError``
and also from the closest builtin exception, so callers may catch either the
package base class or the familiar ``ValueError``/``IndexError``/``RuntimeError``.

Taxonomy
--------
- InvalidDimension: board size is not a positive integer.
- OutOfBounds: a coordinate lies outside the grid.
- UninitializedState: cost or successor logic was requested while some column
  does not hold exactly one queen (e.g., before ``randomize()``).
- InvalidSchedule: decay rate outside ``(0, 1)`` or non-finite threshold.
- InvalidSolution: a zero-cost board failed the independent validity check.
"""

from __future__ import annotations


class QueensError(Exception):
    """Base class for all errors raised by ``nqueens_sa``."""


class InvalidDimension(QueensError, ValueError):
    """Raised when a board is constructed with an unusable size."""


class OutOfBounds(QueensError, IndexError):
    """Raised when a coordinate falls outside the ``size x size`` grid."""


class UninitializedState(QueensError, RuntimeError):
    """Raised when the one-queen-per-column invariant does not hold."""


class InvalidSchedule(QueensError, ValueError):
    """Raised for annealing schedules that cannot terminate or are malformed."""


class InvalidSolution(QueensError, AssertionError):
    """Raised when a board reported as solved does not pass ``is_valid_solution``."""

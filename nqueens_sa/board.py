"""Board state for the N-Queens local search.

The board is an ``N x N`` grid of boolean cells stored as one contiguous,
fixed-length numpy array in row-major order (``index = row * N + column``).
A cell set to ``True`` holds a queen. Search states keep exactly one queen per
column; ``randomize()``, ``from_rows()`` and ``successors()`` all preserve that
invariant, and ``swap_locations()`` realizes a single queen move by exchanging
the occupied and the unoccupied cell of the same column.

Contract (public API)
---------------------
- ``Board(size)``: empty grid, cost unset. ``size`` must be an integer >= 1.
- ``cost()``: number of attacking queen pairs (cached until the next mutation).
  Each unordered pair is counted once, so ``0 <= cost <= N*(N-1)/2``.
- ``successors()``: the ``N*(N-1)`` boards reachable by moving one queen to
  another row of its column. Each successor owns a fresh copy of the cells and
  has its cost unset.

All coordinate access is bounds-checked and raises ``OutOfBounds``; cost and
successor logic raise ``UninitializedState`` until every column holds one queen.
"""

from __future__ import annotations

from typing import List, NamedTuple, Optional, Sequence, TextIO

import numpy as np

from .errors import InvalidDimension, OutOfBounds, UninitializedState


class Location(NamedTuple):
    """A ``(column, row)`` coordinate on the grid."""

    column: int
    row: int


class Board:
    """Square N-Queens grid with cached heuristic cost.

    Parameters
    ----------
    size : int
        Board dimension N (rows == columns == N). Must be a positive integer.

    Raises
    ------
    InvalidDimension
        If ``size`` is not an integer or is smaller than 1.
    """

    def __init__(self, size: int):
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)) or size < 1:
            raise InvalidDimension(f"Board size must be a positive integer, got {size!r}")
        self.size = int(size)
        self._cells = np.zeros(self.size * self.size, dtype=bool)
        self._cost: Optional[int] = None

    # Construction ------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[int]) -> "Board":
        """Build a board from the ``board[col] = row`` encoding.

        ``Board.from_rows([1, 3, 0, 2])`` is one of the two 4-queens solutions.
        A row outside ``[0, len(rows))`` raises ``OutOfBounds``.
        """
        board = cls(len(rows))
        for column, row in enumerate(rows):
            board.place(Location(column, row))
        return board

    def copy(self) -> "Board":
        """Return a deep copy; the new board owns its own cell buffer."""
        clone = Board(self.size)
        clone._cells = self._cells.copy()
        clone._cost = self._cost
        return clone

    def randomize(self, rng: Optional[np.random.Generator] = None) -> None:
        """Place one queen per column on a uniformly drawn row.

        Parameters
        ----------
        rng : numpy.random.Generator | None
            Random source. When omitted a freshly seeded default generator is
            used, so pass one explicitly for reproducible runs.
        """
        if rng is None:
            rng = np.random.default_rng()
        self._cells[:] = False
        rows = rng.integers(0, self.size, size=self.size)
        self._cells[rows * self.size + np.arange(self.size)] = True
        self._cost = None

    # Cell access -------------------------------------------------------------

    @property
    def cells(self) -> np.ndarray:
        """Read-only row-major view of the ``N*N`` cell buffer."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def grid(self) -> np.ndarray:
        """Return an ``N x N`` copy of the cells indexed as ``grid[row, column]``."""
        return self._cells.reshape(self.size, self.size).copy()

    def _index(self, loc: Location) -> int:
        column, row = loc
        for coordinate in (column, row):
            if isinstance(coordinate, bool) or not isinstance(coordinate, (int, np.integer)):
                raise OutOfBounds(f"Location coordinates must be integers, got (column={column!r}, row={row!r})")
        if not (0 <= column < self.size and 0 <= row < self.size):
            raise OutOfBounds(
                f"Location (column={column}, row={row}) is outside a {self.size}x{self.size} board"
            )
        return int(row) * self.size + int(column)

    def get(self, loc: Location) -> bool:
        return bool(self._cells[self._index(loc)])

    def place(self, loc: Location, value: bool = True) -> None:
        """Set a single cell. Does not enforce the one-queen-per-column invariant."""
        self._cells[self._index(loc)] = bool(value)
        self._cost = None

    def swap_locations(self, a: Location, b: Location) -> None:
        """Exchange the occupancy of two cells."""
        index_a = self._index(a)
        index_b = self._index(b)
        self._cells[index_a], self._cells[index_b] = self._cells[index_b], self._cells[index_a]
        self._cost = None

    # Invariant ---------------------------------------------------------------

    def is_initialized(self) -> bool:
        """Return True when every column holds exactly one queen."""
        per_column = self._cells.reshape(self.size, self.size).sum(axis=0)
        return bool(np.all(per_column == 1))

    def _require_initialized(self, action: str) -> None:
        if not self.is_initialized():
            raise UninitializedState(
                f"Cannot compute {action}: every column must hold exactly one queen "
                "(call randomize() or build the board with from_rows())"
            )

    def queen_locations(self) -> List[Location]:
        """Occupied cells in row-major order."""
        return [Location(int(index % self.size), int(index // self.size)) for index in np.flatnonzero(self._cells)]

    def rows(self) -> List[int]:
        """Return the ``board[col] = row`` encoding of this board."""
        self._require_initialized("rows")
        grid = self._cells.reshape(self.size, self.size)
        return [int(row) for row in np.argmax(grid, axis=0)]

    # Cost --------------------------------------------------------------------

    def num_attacking_queens(self) -> int:
        """Count attacking queen pairs by pairwise comparison.

        Two queens attack each other when they share a row, share a column, or
        lie on a common diagonal (``|row difference| == |column difference|``).
        Each unordered pair contributes exactly 1.

        Raises
        ------
        UninitializedState
            If some column does not hold exactly one queen.
        """
        self._require_initialized("cost")
        locations = self.queen_locations()
        attacking = 0
        for i, first in enumerate(locations):
            for second in locations[i + 1:]:
                if (
                    first.row == second.row
                    or first.column == second.column
                    or abs(first.row - second.row) == abs(first.column - second.column)
                ):
                    attacking += 1
        return attacking

    def cost(self) -> int:
        """Heuristic value ``h``; computed once and cached until the next mutation."""
        if self._cost is None:
            self._cost = self.num_attacking_queens()
        return self._cost

    @property
    def h(self) -> int:
        return self.cost()

    @property
    def cost_is_cached(self) -> bool:
        return self._cost is not None

    def is_solution(self) -> bool:
        return self.cost() == 0

    # Neighbourhood -----------------------------------------------------------

    def successors(self) -> List["Board"]:
        """Return every board reachable by moving one queen within its column.

        Successors are ordered by column, then by target row. Each one is an
        independent copy whose cost is unset.
        """
        self._require_initialized("successors")
        result: List[Board] = []
        for column, queen_row in enumerate(self.rows()):
            for row in range(self.size):
                if row == queen_row:
                    continue
                successor = self.copy()
                successor.swap_locations(Location(column, queen_row), Location(column, row))
                result.append(successor)
        return result

    # Display -----------------------------------------------------------------

    def render(self) -> str:
        """Render the grid as rows of ``1``/``0`` tokens."""
        return "\n".join(
            " ".join("1" if cell else "0" for cell in row)
            for row in self._cells.reshape(self.size, self.size)
        )

    def print_board(self, file: Optional[TextIO] = None) -> None:
        print(self.render(), file=file)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self._cells, other._cells))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.is_initialized():
            return f"Board(size={self.size}, rows={self.rows()}, cost={self._cost})"
        return f"Board(size={self.size}, queens={int(self._cells.sum())})"

"""Helpers on the compact ``board[col] = row`` encoding.

``Board.rows()`` converts a grid into this encoding. The counters below are
independent of ``Board`` and serve as cross-checks for its pairwise cost and
as the final validity test applied by the experiment sweep.
"""

from __future__ import annotations

from collections import Counter
from typing import Sequence


def _pairs_in_groups(counter: Counter[int]) -> int:
    return sum(count * (count - 1) // 2 for count in counter.values() if count > 1)


def conflicts(rows: Sequence[int]) -> int:
    """Count attacking queen pairs in O(N).

    Queens sharing a row or a diagonal are bucketed with counters; a bucket of
    ``k`` queens contributes ``k*(k-1)/2`` pairs. Columns never collide in this
    encoding.
    """
    by_row: Counter[int] = Counter()
    by_diag: Counter[int] = Counter()
    by_anti_diag: Counter[int] = Counter()
    for column, row in enumerate(rows):
        by_row[row] += 1
        by_diag[row - column] += 1
        by_anti_diag[row + column] += 1
    return _pairs_in_groups(by_row) + _pairs_in_groups(by_diag) + _pairs_in_groups(by_anti_diag)


def conflicts_on2(rows: Sequence[int]) -> int:
    """Count attacking queen pairs by checking every pair, O(N^2)."""
    total = 0
    for i in range(len(rows)):
        for j in range(i + 1, len(rows)):
            if rows[i] == rows[j] or abs(rows[i] - rows[j]) == j - i:
                total += 1
    return total


def max_conflicts(size: int) -> int:
    """Upper bound of the cost scale: every pair of ``size`` queens attacking."""
    return size * (size - 1) // 2


def is_valid_solution(rows: Sequence[int]) -> bool:
    """Return True if ``rows`` places N non-attacking queens on an N x N board.

    An empty sequence is not a solution; rows must be integers in ``[0, N)``.
    """
    size = len(rows)
    if size == 0:
        return False
    for row in rows:
        if isinstance(row, bool) or not isinstance(row, int) or not 0 <= row < size:
            return False
    return conflicts(rows) == 0

"""Unit tests for the board state: invariant, cost and successor generation."""

from pathlib import Path
import io
import sys
import unittest

import numpy as np

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from nqueens_sa.board import Board, Location
from nqueens_sa.errors import InvalidDimension, OutOfBounds, UninitializedState
from nqueens_sa.utils import conflicts, conflicts_on2


def column_counts(board):
    return board.grid().sum(axis=0)


class ConstructionTests(unittest.TestCase):

    def test_new_board_is_empty_with_unset_cost(self):
        board = Board(4)
        self.assertEqual(board.size, 4)
        self.assertEqual(len(board.cells), 16)
        self.assertFalse(board.cells.any())
        self.assertFalse(board.cost_is_cached)
        self.assertFalse(board.is_initialized())

    def test_rejects_unusable_sizes(self):
        for size in (0, -3, 2.5, True, "4"):
            with self.subTest(size=size):
                with self.assertRaises(InvalidDimension):
                    Board(size)

    def test_invalid_dimension_is_a_value_error(self):
        with self.assertRaises(ValueError):
            Board(0)

    def test_cells_view_is_read_only(self):
        board = Board(3)
        with self.assertRaises(ValueError):
            board.cells[0] = True


class RandomizeTests(unittest.TestCase):

    def test_exactly_one_queen_per_column(self):
        rng = np.random.default_rng(123)
        for size in range(1, 12):
            for _ in range(5):
                board = Board(size)
                board.randomize(rng)
                with self.subTest(size=size):
                    self.assertTrue(np.all(column_counts(board) == 1))
                    self.assertTrue(board.is_initialized())
                    self.assertEqual(int(board.cells.sum()), size)

    def test_randomize_again_keeps_invariant_and_clears_cost(self):
        rng = np.random.default_rng(5)
        board = Board(6)
        board.randomize(rng)
        board.cost()
        board.randomize(rng)
        self.assertFalse(board.cost_is_cached)
        self.assertTrue(np.all(column_counts(board) == 1))

    def test_same_seed_same_board(self):
        first, second = Board(8), Board(8)
        first.randomize(np.random.default_rng(99))
        second.randomize(np.random.default_rng(99))
        self.assertEqual(first, second)

    def test_randomize_without_generator(self):
        board = Board(5)
        board.randomize()
        self.assertTrue(board.is_initialized())


class CostTests(unittest.TestCase):

    def test_four_queens_solution_has_zero_cost(self):
        board = Board.from_rows([1, 3, 0, 2])
        self.assertEqual(board.cost(), 0)
        self.assertTrue(board.is_solution())
        self.assertEqual(Board.from_rows([2, 0, 3, 1]).cost(), 0)

    def test_eight_queens_solution_has_zero_cost(self):
        self.assertEqual(Board.from_rows([0, 4, 7, 5, 2, 6, 1, 3]).cost(), 0)

    def test_each_attacking_pair_counted_once(self):
        self.assertEqual(Board.from_rows([0, 0, 0, 0]).cost(), 6)
        self.assertEqual(Board.from_rows([0, 1, 2, 3]).cost(), 6)
        self.assertEqual(Board.from_rows([0, 0]).cost(), 1)
        self.assertEqual(Board.from_rows([2, 1, 0]).cost(), 3)

    def test_single_queen_board(self):
        self.assertEqual(Board.from_rows([0]).cost(), 0)

    def test_cost_matches_independent_counters(self):
        rng = np.random.default_rng(2024)
        for size in (2, 4, 7, 12):
            for _ in range(10):
                board = Board(size)
                board.randomize(rng)
                rows = board.rows()
                with self.subTest(rows=rows):
                    self.assertEqual(board.cost(), conflicts(rows))
                    self.assertEqual(board.cost(), conflicts_on2(rows))

    def test_cost_independent_of_placement_order(self):
        rows = [3, 1, 1, 4, 0, 2]
        forward = Board(6)
        for column, row in enumerate(rows):
            forward.place(Location(column, row))
        backward = Board(6)
        for column in reversed(range(6)):
            backward.place(Location(column, rows[column]))
        self.assertEqual(forward.cost(), backward.cost())
        self.assertEqual(forward.cost(), Board.from_rows(rows).cost())

    def test_cost_is_cached_and_exposed_as_h(self):
        board = Board.from_rows([0, 0, 0])
        self.assertFalse(board.cost_is_cached)
        self.assertEqual(board.h, 3)
        self.assertTrue(board.cost_is_cached)

    def test_mutation_clears_cached_cost(self):
        board = Board.from_rows([0, 0, 0, 0])
        self.assertEqual(board.cost(), 6)
        board.swap_locations(Location(1, 0), Location(1, 3))
        self.assertFalse(board.cost_is_cached)
        self.assertEqual(board.rows(), [0, 3, 0, 0])
        self.assertEqual(board.cost(), conflicts([0, 3, 0, 0]))

    def test_cost_requires_one_queen_per_column(self):
        with self.assertRaises(UninitializedState):
            Board(4).cost()
        board = Board.from_rows([0, 1, 2, 3])
        board.place(Location(0, 2))
        with self.assertRaises(UninitializedState):
            board.cost()
        with self.assertRaises(RuntimeError):
            board.rows()


class BoundsTests(unittest.TestCase):

    def test_out_of_bounds_access(self):
        board = Board(4)
        for loc in (Location(4, 0), Location(0, 4), Location(-1, 0), Location(0, -1)):
            with self.subTest(loc=loc):
                with self.assertRaises(OutOfBounds):
                    board.get(loc)
                with self.assertRaises(OutOfBounds):
                    board.place(loc)

    def test_swap_out_of_bounds_leaves_board_untouched(self):
        board = Board.from_rows([1, 3, 0, 2])
        before = board.grid()
        with self.assertRaises(IndexError):
            board.swap_locations(Location(0, 1), Location(0, 7))
        self.assertTrue(np.array_equal(board.grid(), before))

    def test_non_integer_coordinates_are_rejected(self):
        board = Board(4)
        for loc in (Location(1.7, 0), Location(0, 2.0), Location(True, 0)):
            with self.subTest(loc=loc):
                with self.assertRaises(OutOfBounds):
                    board.get(loc)
                with self.assertRaises(OutOfBounds):
                    board.place(loc)
        self.assertFalse(board.cells.any())

    def test_numpy_integer_coordinates_are_accepted(self):
        board = Board.from_rows(np.array([1, 3, 0, 2]))
        self.assertTrue(board.get(Location(np.int64(1), np.int64(3))))
        self.assertEqual(board.cost(), 0)

    def test_from_rows_rejects_row_outside_grid(self):
        with self.assertRaises(OutOfBounds):
            Board.from_rows([0, 4, 1, 2])

    def test_from_rows_rejects_empty_sequence(self):
        with self.assertRaises(InvalidDimension):
            Board.from_rows([])


class SuccessorTests(unittest.TestCase):

    def setUp(self):
        self.rng = np.random.default_rng(7)

    def test_successor_count(self):
        for size in (2, 4, 8, 16):
            board = Board(size)
            board.randomize(self.rng)
            with self.subTest(size=size):
                self.assertEqual(len(board.successors()), size * (size - 1))

    def test_each_successor_moves_exactly_one_queen(self):
        board = Board(6)
        board.randomize(self.rng)
        source = board.rows()
        seen = set()
        for successor in board.successors():
            self.assertTrue(np.all(column_counts(successor) == 1))
            rows = successor.rows()
            changed = [column for column in range(6) if rows[column] != source[column]]
            self.assertEqual(len(changed), 1)
            seen.add(tuple(rows))
        self.assertEqual(len(seen), 6 * 5)

    def test_successors_ordered_by_column_then_row(self):
        successors = Board.from_rows([1, 3, 0, 2]).successors()
        self.assertEqual(successors[0].rows(), [0, 3, 0, 2])
        self.assertEqual(successors[1].rows(), [2, 3, 0, 2])
        self.assertEqual(successors[2].rows(), [3, 3, 0, 2])
        self.assertEqual(successors[3].rows(), [1, 0, 0, 2])

    def test_successors_have_unset_cost_and_own_their_cells(self):
        board = Board.from_rows([1, 3, 0, 2])
        board.cost()
        successors = board.successors()
        for successor in successors:
            self.assertFalse(successor.cost_is_cached)
        successors[0].swap_locations(Location(3, 2), Location(3, 0))
        self.assertEqual(board.rows(), [1, 3, 0, 2])
        self.assertEqual(board.cost(), 0)

    def test_successors_require_initialized_board(self):
        with self.assertRaises(UninitializedState):
            Board(5).successors()

    def test_single_queen_board_has_no_successors(self):
        self.assertEqual(Board.from_rows([0]).successors(), [])


class CopyAndDisplayTests(unittest.TestCase):

    def test_copy_is_deep(self):
        board = Board.from_rows([0, 2, 1])
        board.cost()
        clone = board.copy()
        self.assertEqual(clone, board)
        self.assertTrue(clone.cost_is_cached)
        clone.swap_locations(Location(0, 0), Location(0, 1))
        self.assertNotEqual(clone, board)
        self.assertEqual(board.rows(), [0, 2, 1])

    def test_queen_locations_in_row_major_order(self):
        board = Board.from_rows([1, 3, 0, 2])
        self.assertEqual(
            board.queen_locations(),
            [Location(2, 0), Location(0, 1), Location(3, 2), Location(1, 3)],
        )

    def test_render(self):
        expected = "0 0 1 0\n1 0 0 0\n0 0 0 1\n0 1 0 0"
        self.assertEqual(Board.from_rows([1, 3, 0, 2]).render(), expected)

    def test_print_board_to_stream(self):
        stream = io.StringIO()
        Board.from_rows([0, 1]).print_board(file=stream)
        self.assertEqual(stream.getvalue(), "1 0\n0 1\n")

    def test_repr(self):
        self.assertIn("rows=[1, 3, 0, 2]", repr(Board.from_rows([1, 3, 0, 2])))
        self.assertIn("queens=0", repr(Board(3)))


if __name__ == "__main__":
    unittest.main()

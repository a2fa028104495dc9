import unittest

from connect_four_engine.board import Board
from connect_four_engine.errors import InvalidDimensionError, OutOfBoundsError
from connect_four_engine.player import Player

RED = Player("red")
YELLOW = Player("yellow")


class TestBoardDimensions(unittest.TestCase):
    def test_valid_dimensions(self):
        for width, height in [(7, 6), (1, 1), (4, 10), (20, 3)]:
            board = Board(width, height)
            self.assertEqual((board.width, board.height), (width, height))
            self.assertEqual(len(board.rows), height)
            self.assertTrue(all(len(row) == width for row in board.rows))

    def test_defaults_to_standard_board(self):
        board = Board()
        self.assertEqual((board.width, board.height), (7, 6))

    def test_integral_float_is_accepted(self):
        board = Board(7.0, 6.0)
        self.assertEqual((board.width, board.height), (7, 6))
        self.assertIsInstance(board.width, int)

    def test_invalid_dimensions(self):
        bad_values = [0, -1, -7, 2.5, float("inf"), float("-inf"), float("nan"), "7", None, True]
        for value in bad_values:
            with self.subTest(width=value):
                with self.assertRaises(InvalidDimensionError):
                    Board(value, 6)
            with self.subTest(height=value):
                with self.assertRaises(InvalidDimensionError):
                    Board(7, value)

    def test_all_cells_start_empty(self):
        board = Board(3, 2)
        self.assertEqual(board.rows, ((None, None, None), (None, None, None)))
        self.assertFalse(board.is_full())


class TestBoardLanding(unittest.TestCase):
    def setUp(self):
        self.board = Board(7, 6)

    def test_empty_column_lands_on_bottom_row(self):
        self.assertEqual(self.board.find_landing_row(0), 5)
        self.assertEqual(self.board.find_landing_row(6), 5)

    def test_pieces_stack_upward(self):
        for expected_row in range(5, -1, -1):
            row = self.board.find_landing_row(2)
            self.assertEqual(row, expected_row)
            self.board.place(row, 2, RED if expected_row % 2 else YELLOW)
        self.assertIsNone(self.board.find_landing_row(2))

    def test_out_of_range_columns_have_no_landing_row(self):
        for column in [-1, 7, 100, "3", None, 2.0, True, False]:
            with self.subTest(column=column):
                self.assertIsNone(self.board.find_landing_row(column))

    def test_cell_owner(self):
        self.board.place(5, 3, RED)
        self.assertEqual(self.board.cell_owner(5, 3), RED)
        self.assertIsNone(self.board.cell_owner(4, 3))

    def test_cell_owner_out_of_bounds(self):
        for row, column in [(-1, 0), (6, 0), (0, -1), (0, 7)]:
            with self.subTest(row=row, column=column):
                with self.assertRaises(OutOfBoundsError):
                    self.board.cell_owner(row, column)

    def test_in_bounds(self):
        self.assertTrue(self.board.in_bounds(0, 0))
        self.assertTrue(self.board.in_bounds(5, 6))
        self.assertFalse(self.board.in_bounds(6, 0))
        self.assertFalse(self.board.in_bounds(0, -1))

    def test_is_full(self):
        board = Board(2, 2)
        for column in range(2):
            for player in (RED, YELLOW):
                self.assertFalse(board.is_full())
                board.place(board.find_landing_row(column), column, player)
        self.assertTrue(board.is_full())

    def test_rows_is_a_snapshot(self):
        rows = self.board.rows
        self.board.place(5, 0, RED)
        self.assertIsNone(rows[5][0])
        self.assertEqual(self.board.rows[5][0], RED)


if __name__ == "__main__":
    unittest.main()

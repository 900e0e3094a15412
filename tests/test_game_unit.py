import unittest

from game import (
    EMPTY_BOARD,
    WIN_LINES,
    O,
    X,
    calculate_winner,
    empty_cells,
    is_full,
    pretty,
    winning_line,
)
from tictactoe_core.board import check_cell, index, with_mark


def make_board(rows):
    flat = []
    for r in rows:
        assert len(r) == 3
        flat.extend(None if c == '.' else c for c in r)
    return tuple(flat)


class TestBoardHelpers(unittest.TestCase):
    def test_given_row_and_column_when_indexing_then_row_major(self):
        self.assertEqual(index(0, 0), 0)
        self.assertEqual(index(1, 2), 5)
        self.assertEqual(index(2, 0), 6)

    def test_given_board_when_with_mark_then_copy_changed_and_original_kept(self):
        b2 = with_mark(EMPTY_BOARD, 4, X)
        self.assertEqual(b2[4], X)
        self.assertIsNone(EMPTY_BOARD[4])
        self.assertEqual(sum(1 for v in b2 if v is not None), 1)

    def test_given_out_of_range_or_non_int_cell_when_checking_then_value_error(self):
        for bad in (-1, 9, 100, '3', None, 1.0, True):
            with self.assertRaises(ValueError):
                check_cell(bad)
        self.assertEqual(check_cell(8), 8)

    def test_given_boards_when_checking_fullness_then_expected(self):
        self.assertFalse(is_full(EMPTY_BOARD))
        full = make_board(['XOX', 'XOO', 'OXX'])
        self.assertTrue(is_full(full))
        self.assertEqual(empty_cells(full), [])
        self.assertEqual(empty_cells(make_board(['X..', '.O.', '...'])), [1, 2, 3, 5, 6, 7, 8])

    def test_given_board_when_pretty_then_marks_indices_and_highlight_rendered(self):
        board = make_board(['XXX', '.O.', '..O'])
        txt = pretty(board, (0, 1, 2))
        self.assertIn('[X]', txt)
        self.assertIn(' 3 ', txt)
        self.assertIn(' O ', txt)
        self.assertEqual(len(txt.splitlines()), 5)


class TestCalculateWinner(unittest.TestCase):
    def test_given_empty_board_when_checking_then_no_winner(self):
        self.assertIsNone(calculate_winner(EMPTY_BOARD))
        self.assertIsNone(winning_line(EMPTY_BOARD))

    def test_given_each_line_filled_when_checking_then_that_mark_wins(self):
        for mark in (X, O):
            for line in WIN_LINES:
                board = EMPTY_BOARD
                for i in line:
                    board = with_mark(board, i, mark)
                self.assertEqual(calculate_winner(board), mark, line)
                self.assertEqual(winning_line(board), line)

    def test_given_mixed_line_when_checking_then_no_winner(self):
        board = make_board(['XXO', 'O..', '...'])
        self.assertIsNone(calculate_winner(board))

    def test_given_full_board_without_line_when_checking_then_none_not_draw(self):
        board = make_board(['XOX', 'XOO', 'OXX'])
        self.assertIsNone(calculate_winner(board))

    def test_given_two_complete_lines_when_checking_then_first_in_order_wins(self):
        board = make_board(['OOO', '...', 'XXX'])
        self.assertEqual(calculate_winner(board), O)
        self.assertEqual(winning_line(board), (0, 1, 2))
        board2 = make_board(['X.O', 'X.O', 'X.O'])
        self.assertEqual(calculate_winner(board2), X)
        self.assertEqual(winning_line(board2), (0, 3, 6))

    def test_given_same_board_when_called_twice_then_same_result_and_board_untouched(self):
        board = make_board(['X.O', '.X.', 'O.X'])
        before = tuple(board)
        first = calculate_winner(board)
        second = calculate_winner(tuple(board))
        self.assertEqual(first, X)
        self.assertEqual(first, second)
        self.assertEqual(board, before)


if __name__ == '__main__':
    unittest.main()
